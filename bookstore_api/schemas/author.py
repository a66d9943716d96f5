"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Create and update share the same fields: PUT is a full replace, so every
required field is resupplied and an omitted bio is stored as null.

Required fields use default=None with validate_default=True so that a
missing field reaches the same "before" validator as an empty one and
produces the same message ("Name is required").
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore_api.utils.parsing import parse_iso_date


class AuthorBase(BaseModel):
    """
    Base schema with the writable author fields.

    Validation:
    - name: present, a string, non-empty after trimming (stored trimmed)
    - birthdate: an ISO-8601 date
    - bio: optional free text
    """

    name: str = Field(
        default=None,
        validate_default=True,
        max_length=255,
        description="Author's full name",
        examples=["Jane Austen", "George Orwell"],
    )

    bio: str | None = Field(
        default=None,
        description="Author biography",
        examples=["English novelist known for her social commentary."],
    )

    birthdate: date = Field(
        default=None,
        validate_default=True,
        description="Date of birth (ISO-8601)",
        examples=["1775-12-16"],
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_empty(cls, v: object) -> str:
        """
        Require a non-blank name and normalize surrounding whitespace.

        Runs before type coercion, so missing values (None) and non-strings
        get the same message as blank strings.

        Raises:
            ValueError: If the name is missing, not text, or blank
        """
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("birthdate", mode="before")
    @classmethod
    def birthdate_must_be_iso_date(cls, v: object) -> date:
        """Parse the birthdate as an ISO-8601 date."""
        parsed = parse_iso_date(v)
        if parsed is None:
            raise ValueError("Birthdate must be a valid date")
        return parsed


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Example request body:
    {
        "name": "Jane Austen",
        "birthdate": "1775-12-16"
    }
    """
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for replacing an existing author.

    Same fields as AuthorCreate. Fields left out take their defaults, so
    omitting bio clears it.
    """
    pass


class AuthorResponse(BaseModel):
    """
    Schema for author responses (what the API returns).

    from_attributes=True lets the schema read SQLAlchemy model instances.
    """

    id: int = Field(..., description="Unique identifier", examples=[1])
    name: str = Field(..., description="Author's full name")
    bio: str | None = Field(default=None, description="Author biography")
    birthdate: date = Field(..., description="Date of birth")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Jane Austen",
                "bio": None,
                "birthdate": "1775-12-16",
            }
        },
    )
