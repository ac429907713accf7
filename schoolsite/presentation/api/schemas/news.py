from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(max_length=255)
    content: str
    excerpt: Optional[str] = None
    category: str = Field(max_length=100)
    author: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    published: bool = False


class NewsUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)
    author: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    published: Optional[bool] = None
