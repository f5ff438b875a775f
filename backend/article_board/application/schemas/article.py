"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field

from article_board.domain.entities import Article
from article_board.domain.exceptions import FieldError


class ArticleForm(BaseModel):
    """Submitted article fields plus any validation errors to redisplay.

    Holds exactly what the user typed, so an invalid submission can be
    rendered back without going through the persistence layer.
    """

    id: int | None = None
    title: str = ""
    author: str = ""
    body: str = ""
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def from_article(cls, article: Article) -> "ArticleForm":
        return cls(
            id=article.id,
            title=article.title,
            author=article.author,
            body=article.body,
        )

    def with_errors(self, errors: list[FieldError]) -> "ArticleForm":
        """Return a copy of this form carrying the given errors."""
        return self.model_copy(update={"errors": list(errors)})

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def error_for(self, field: str) -> str | None:
        for error in self.errors:
            if error.field == field:
                return error.message
        return None
