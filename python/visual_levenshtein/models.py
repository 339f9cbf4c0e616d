from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _GroupedEdit(BaseModel):
    model_config = ConfigDict(frozen=True)


class EqualityEdit(_GroupedEdit):
    """Text shared verbatim by both sides."""

    kind: Literal["equality"] = "equality"
    text: str

    @property
    def origin_text(self) -> str:
        return self.text

    @property
    def dest_text(self) -> str:
        return self.text


class DeletionEdit(_GroupedEdit):
    """Text present only in the origin."""

    kind: Literal["deletion"] = "deletion"
    text: str

    @property
    def origin_text(self) -> str:
        return self.text

    @property
    def dest_text(self) -> str:
        return ""


class InsertionEdit(_GroupedEdit):
    """Text present only in the destination."""

    kind: Literal["insertion"] = "insertion"
    text: str

    @property
    def origin_text(self) -> str:
        return ""

    @property
    def dest_text(self) -> str:
        return self.text


class SubstitutionEdit(_GroupedEdit):
    """A run of origin tokens replaced one-for-one by destination tokens."""

    kind: Literal["substitution"] = "substitution"
    origin: str = Field(..., description="Replaced text, as it reads in the origin.")
    dest: str = Field(..., description="Replacement text, as it reads in the destination.")

    @property
    def origin_text(self) -> str:
        return self.origin

    @property
    def dest_text(self) -> str:
        return self.dest


Edit = Annotated[
    Union[EqualityEdit, DeletionEdit, InsertionEdit, SubstitutionEdit],
    Field(discriminator="kind"),
]
