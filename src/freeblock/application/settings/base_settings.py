"""
Base Settings

Provides a standardized foundation for settings schemas.

Features:
- Dataclass-based schema with type safety
- Backwards-compatible loading (handles missing fields)
- Field validation with ValidationResult

Usage:
    1. Create a dataclass for your settings schema inheriting BaseSettings
    2. Declare fields with validated_field() where rules apply
    3. Call validate() after loading or merging external data
"""
from dataclasses import dataclass, asdict, fields, field
from typing import Optional, Dict, Any, List, Callable, Union


# =============================================================================
# Validation Framework
# =============================================================================

@dataclass
class ValidationResult:
    """
    Result of validating settings.
    
    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
        warnings: List of warning messages (non-blocking issues)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    
    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False
    
    def add_warning(self, message: str):
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)
    
    def merge(self, other: 'ValidationResult'):
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
    
    def __bool__(self) -> bool:
        return self.valid


@dataclass
class FieldValidator:
    """
    Validation rules for a settings field.
    
    Example:
        @dataclass
        class MySettings(BaseSettings):
            grid_size: int = field(default=20, metadata={
                'validator': FieldValidator(min_value=1)
            })
    """
    # Range validation (for numbers)
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    
    # Whether to allow None values
    allow_none: bool = True
    
    # Custom validation function
    # Signature: (value, field_name) -> Optional[str] (returns error message or None)
    custom: Optional[Callable[[Any, str], Optional[str]]] = None
    
    def validate(self, value: Any, field_name: str) -> ValidationResult:
        """
        Validate a value against this validator's rules.
        
        Args:
            value: The value to validate
            field_name: Name of the field (for error messages)
            
        Returns:
            ValidationResult with any errors/warnings
        """
        result = ValidationResult()
        
        if value is None:
            if not self.allow_none:
                result.add_error(f"{field_name}: Cannot be None")
            return result
        
        # Custom check first so type errors short-circuit the range checks
        if self.custom is not None:
            error = self.custom(value, field_name)
            if error:
                result.add_error(error)
                return result
        
        if self.min_value is not None and isinstance(value, (int, float)):
            if value < self.min_value:
                result.add_error(f"{field_name}: Value {value} is below minimum {self.min_value}")
        
        if self.max_value is not None and isinstance(value, (int, float)):
            if value > self.max_value:
                result.add_error(f"{field_name}: Value {value} is above maximum {self.max_value}")
        
        return result


def validated_field(
    default: Any = None,
    *,
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    allow_none: bool = True,
    custom: Optional[Callable[[Any, str], Optional[str]]] = None,
    **kwargs
):
    """
    Create a dataclass field with validation metadata.
    
    Wraps dataclasses.field() with a FieldValidator in the metadata.
    
    Example:
        @dataclass
        class MySettings(BaseSettings):
            spacing: int = validated_field(300, min_value=1)
    """
    validator = FieldValidator(
        min_value=min_value,
        max_value=max_value,
        allow_none=allow_none,
        custom=custom,
    )
    
    metadata = kwargs.pop('metadata', {})
    metadata['validator'] = validator
    
    return field(default=default, metadata=metadata, **kwargs)


@dataclass
class BaseSettings:
    """
    Base class for all settings dataclasses.
    
    Subclasses should define fields with default values for backwards compatibility.
    """
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for storage."""
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseSettings':
        """
        Create settings from dictionary.
        
        Handles missing keys by using defaults - ensures backwards compatibility
        when new settings are added.
        """
        defaults = cls()
        
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        
        merged = asdict(defaults)
        merged.update(filtered_data)
        
        return cls(**merged)
    
    def validate(self) -> ValidationResult:
        """
        Validate all settings fields against their validators.
        
        Fields without validators are skipped (assumed valid).
        """
        result = ValidationResult()
        
        for f in fields(self):
            validator = f.metadata.get('validator') if f.metadata else None
            if validator is None:
                continue
            result.merge(validator.validate(getattr(self, f.name), f.name))
        
        return result
