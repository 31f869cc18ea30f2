from tf2sku.models.attribute_set import (
    AttributeSet,
    InsertError,
    InsertErrorKind,
    SpellSet,
    StrangePartSet,
)
from tf2sku.models.enums import (
    FootprintsSpell,
    KillstreakTier,
    Killstreaker,
    Paint,
    PaintSpell,
    Quality,
    Sheen,
    Spell,
    StrangePart,
    Wear,
)
from tf2sku.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    AttributeLimitError,
    DuplicateAttributeError,
    EmptyFieldError,
    FailureDetail,
    FailureKind,
    InsufficientFieldsError,
    InvalidAttributeValueError,
    InvalidDefindexError,
    InvalidQualityError,
    KnownError,
    OutcomeType,
    RefusalError,
    SkuParseError,
    UnknownAttributeError,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from tf2sku.models.sku import Sku

__all__ = [
    "ApiResponse",
    "AttributeLimitError",
    "AttributeSet",
    "DuplicateAttributeError",
    "EmptyFieldError",
    "FailureDetail",
    "FailureKind",
    "FootprintsSpell",
    "InsertError",
    "InsertErrorKind",
    "InsufficientFieldsError",
    "InvalidAttributeValueError",
    "InvalidDefindexError",
    "InvalidQualityError",
    "KillstreakTier",
    "Killstreaker",
    "KnownError",
    "OutcomeType",
    "Paint",
    "PaintSpell",
    "Quality",
    "RefusalError",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "Sheen",
    "Sku",
    "SkuParseError",
    "Spell",
    "SpellSet",
    "StrangePart",
    "StrangePartSet",
    "UnknownAttributeError",
    "Wear",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
]
