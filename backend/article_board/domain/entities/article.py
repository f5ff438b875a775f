"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from article_board.domain.exceptions import FieldError, ValidationError

# Field name → label used in error messages, in display order.
REQUIRED_FIELDS: dict[str, str] = {
    "title": "Title",
    "author": "Author",
    "body": "Body",
}


def validate_article_fields(title: str, author: str, body: str) -> list[FieldError]:
    """Return one FieldError per required field that is empty or blank."""
    values = {"title": title, "author": author, "body": body}
    return [
        FieldError(name, f'Please provide a value for "{label}"')
        for name, label in REQUIRED_FIELDS.items()
        if not (values[name] or "").strip()
    ]


@dataclass
class Article:
    """Core domain entity representing a published article."""

    title: str
    author: str
    body: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def validate(self) -> None:
        """Raise ValidationError if any required field is empty."""
        errors = validate_article_fields(self.title, self.author, self.body)
        if errors:
            raise ValidationError(errors)

    def update(self, title: str, author: str, body: str) -> None:
        """Replace the editable fields and refresh the updated_at timestamp.

        Validation runs first; on failure the article is left untouched.
        """
        errors = validate_article_fields(title, author, body)
        if errors:
            raise ValidationError(errors)
        self.title = title
        self.author = author
        self.body = body
        self.updated_at = datetime.now(timezone.utc)
