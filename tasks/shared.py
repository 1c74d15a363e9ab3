# tasks/shared.py
from typing import Optional, Sequence

from core.schemas import FieldSpec, FieldType

CASE_CATEGORIES = ("general", "criminal", "civil")

DOCUMENT_TYPES = (
    "motion", "affidavit", "complaint",
    "motionForBailReduction", "discoveryRequest", "petitionForExpungement",
    "foiaRequest",
    "civilCoverSheet", "summons", "motionToQuash", "motionToDismiss",
    "inFormaPauperisApplication", "declarationOfNextFriend", "tpoChallengeResponse",
)


def text(name: str, description: str, *, required: bool = True,
         min_length: Optional[int] = None, message: Optional[str] = None) -> FieldSpec:
    return FieldSpec(
        name=name, type=FieldType.STRING, description=description,
        required=required, min_length=min_length, message=message,
    )


def text_list(name: str, description: str, *, required: bool = True,
              min_items: Optional[int] = None, max_items: Optional[int] = None) -> FieldSpec:
    return FieldSpec(
        name=name, type=FieldType.ARRAY, description=description, required=required,
        items=FieldSpec(name="item", type=FieldType.STRING),
        min_items=min_items, max_items=max_items,
    )


def choice(name: str, choices: Sequence[str], description: str) -> FieldSpec:
    return FieldSpec(name=name, type=FieldType.ENUM, choices=tuple(choices), description=description)


def choice_list(name: str, choices: Sequence[str], description: str, *,
                required: bool = True) -> FieldSpec:
    return FieldSpec(
        name=name, type=FieldType.ARRAY, description=description, required=required,
        items=FieldSpec(name="item", type=FieldType.ENUM, choices=tuple(choices)),
    )


def case_category() -> FieldSpec:
    return choice("caseCategory", CASE_CATEGORIES, "The category of the case.")


def confidence_score(description: str) -> FieldSpec:
    return FieldSpec(
        name="confidenceScore", type=FieldType.NUMBER,
        minimum=0.0, maximum=1.0, description=description,
    )
