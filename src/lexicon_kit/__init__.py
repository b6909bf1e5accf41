"""lexicon-kit: multilingual entries and transitive translation queries."""

__version__ = "0.1.0"

from .exceptions import (
    LexiconKitError as LexiconKitError,
    ValidationError as ValidationError,
)
from .models import (
    Expression as Expression,
    ExpressionGroup as ExpressionGroup,
    Language as Language,
    ValidationResult as ValidationResult,
    ValidationSeverity as ValidationSeverity,
)
from .synoset import Synoset as Synoset
from .entry import Entry as Entry
from .lexicon import Lexicon as Lexicon
from .validator import (
    validate_entry as validate_entry,
    validate_lexicon as validate_lexicon,
)

__all__ = [
    # Value types
    "Language",
    "Expression",
    "ExpressionGroup",
    "Synoset",
    "Entry",
    "Lexicon",
    # Validation
    "ValidationResult",
    "ValidationSeverity",
    "validate_entry",
    "validate_lexicon",
    # Exceptions
    "LexiconKitError",
    "ValidationError",
]
