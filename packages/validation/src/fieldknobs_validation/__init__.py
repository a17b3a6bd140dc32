"""fieldknobs Validation - composable string validation.

Validate one user-entered string against a flat set of prioritized rules
and get back either a valid result or every distinct reason it failed:

    >>> from fieldknobs_validation import EmailValidator
    >>> EmailValidator().is_valid("test@gmail.com")
    True
    >>> EmailValidator().validate("test@gmailcom").messages
    ['Invalid Email']
"""

from .builder import collect_rules
from .error import ValidationError
from .factory import ValidatorFactory, load_validators, validator_factory
from .lookups import LOOKUPS, US_STATES
from .patterns import RegexPattern
from .registry import ValidatorRegistry, default_registry
from .result import ValidationResult
from .rules import (
    AlwaysValidRule,
    FullNameRule,
    LengthRule,
    MembershipRule,
    NonAsciiRule,
    NonEmptyRule,
    RangeLengthRule,
    RegexRule,
    StateRule,
    ValidationRule,
)
from .validator import Validator
from .validators import (
    AlwaysValidValidator,
    BaseValidator,
    CCVValidator,
    EmailValidator,
    FullNameValidator,
    LastFourSSNValidator,
    PhoneStyle,
    PhoneValidator,
    SSNValidator,
    StateValidator,
    ZipValidator,
    create_stock_validator,
    stock_validator_names,
)

__version__ = "0.1.0"

__all__ = [
    # Result types
    "ValidationError",
    "ValidationResult",
    # Rules
    "ValidationRule",
    "AlwaysValidRule",
    "FullNameRule",
    "LengthRule",
    "MembershipRule",
    "NonAsciiRule",
    "NonEmptyRule",
    "RangeLengthRule",
    "RegexRule",
    "StateRule",
    "collect_rules",
    # Data
    "RegexPattern",
    "US_STATES",
    "LOOKUPS",
    # Validators
    "Validator",
    "AlwaysValidValidator",
    "BaseValidator",
    "CCVValidator",
    "EmailValidator",
    "FullNameValidator",
    "LastFourSSNValidator",
    "PhoneStyle",
    "PhoneValidator",
    "SSNValidator",
    "StateValidator",
    "ZipValidator",
    "create_stock_validator",
    "stock_validator_names",
    # Registry and factories
    "ValidatorRegistry",
    "default_registry",
    "ValidatorFactory",
    "validator_factory",
    "load_validators",
]
