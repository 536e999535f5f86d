"""JSONPlaceholder resource models."""

from pydantic import BaseModel


class Post(BaseModel):
    """A blog post from the /posts collection."""

    id: int
    userId: int
    title: str
    body: str


class Company(BaseModel):
    name: str


class User(BaseModel):
    """A user from the /users collection; unused fields are ignored."""

    id: int
    name: str
    username: str
    email: str
    website: str
    company: Company


class PostSummary(BaseModel):
    """Descriptive statistics over a list of posts."""

    total_posts: int
    unique_users: int
    average_title_length: float
    average_body_length: float
    top_users: list[tuple[int, int]]
