"""
Input validation schemas using Pydantic for the packing list API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from packlist.utilities.constants import DEFAULT_PRIORITY

_PRIORITY_PATTERN = r'^(low|medium|high|essential)$'


class ListInput(BaseModel):
    """Schema for a new packing list."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    tags: List[str] = Field(default_factory=list)
    is_template: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """List name cannot be blank."""
        if not v.strip():
            raise ValueError('List name cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]


class CopyInput(BaseModel):
    """Schema for duplicating a list, saving it as a template or applying a template."""
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)

    @field_validator('name', 'description')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class CategoryInput(BaseModel):
    """Schema for category input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(default="", max_length=20)
    icon: str = Field(default="", max_length=50)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class ItemInput(BaseModel):
    """Schema for a new item; force=True skips the duplicate prompt."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(default=1, ge=0, le=10000)
    priority: str = Field(default=DEFAULT_PRIORITY, pattern=_PRIORITY_PATTERN)
    notes: str = Field(default="", max_length=500)
    description: str = Field(default="", max_length=500)
    packed: bool = False
    force: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Item name cannot be blank."""
        if not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip()


class ItemUpdateInput(BaseModel):
    """Schema for partial item updates; unset fields are left alone."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    quantity: Optional[int] = Field(None, ge=0, le=10000)
    priority: Optional[str] = Field(None, pattern=_PRIORITY_PATTERN)
    notes: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=500)
    packed: Optional[bool] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """A renamed item still needs a name."""
        if v is not None and not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip() if v is not None else v


class MoveItemInput(BaseModel):
    category_id: str = Field(..., min_length=1)


class DuplicateCheckInput(BaseModel):
    """Schema for an ad-hoc duplicate check against a list."""
    name: str = Field(..., max_length=100)
    threshold: Optional[int] = Field(None, ge=0, le=20)
