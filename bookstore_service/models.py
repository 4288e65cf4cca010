from pydantic import BaseModel, Field


class Book(BaseModel):
    """A bookstore catalog entry as stored in the ``books`` collection."""

    title: str
    author: str
    genre: str
    published_year: int = Field(ge=0)
    price: float = Field(ge=0)
    in_stock: bool = True

    def to_document(self) -> dict:
        return self.model_dump()
