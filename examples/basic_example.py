"""
Basic example of using controllerql with Strawberry GraphQL.

This example demonstrates:
- Exposing controller methods as queries and mutations
- Typing fields with annotations, or with docstrings where annotations are vague
- Hiding fields with @logged and @right
- Building and executing a Strawberry schema from the providers
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import strawberry

from controllerql import (
    ControllerQueryProvider,
    StaticAuthenticationService,
    StaticAuthorizationService,
    StrawberryTypeMapper,
    build_schema,
    logged,
    mutation,
    query,
    right,
)


# Domain classes
@dataclass
class Author:
    name: str
    id: int = 0


@dataclass
class Post:
    id: int
    title: str
    author_id: int
    tags: List[str] = field(default_factory=list)


# Strawberry GraphQL types
@strawberry.type(name='Author')
class AuthorType:
    id: int
    name: str


@strawberry.input(name='AuthorInput')
class AuthorInput:
    name: str


@strawberry.type(name='Post')
class PostType:
    id: int
    title: str
    tags: List[str]


AUTHORS = {1: Author(id=1, name='Alice Johnson'), 2: Author(id=2, name='Bob Smith')}
POSTS = [
    Post(id=1, title='First Post', author_id=1, tags=['intro']),
    Post(id=2, title='GraphQL is Great', author_id=1, tags=['graphql']),
    Post(id=3, title='Python Best Practices', author_id=2, tags=['python']),
]


class BlogController:
    @query
    def author(self, id: int) -> Optional[Author]:
        """Look up an author by id."""
        return AUTHORS.get(id)

    @query
    def posts(self, author_id: Optional[int] = None, tags=None) -> list:
        """Posts, optionally filtered by author or tag.

        :type tags: string[]|null
        :rtype: Post[]
        """
        out = [p for p in POSTS if author_id is None or p.author_id == author_id]
        if tags:
            out = [p for p in out if set(tags) & set(p.tags)]
        return out

    @query
    async def latest(self) -> Any:
        """:rtype: ?Post"""
        return POSTS[-1] if POSTS else None

    @mutation
    @logged
    @right('CAN_WRITE')
    def add_author(self, author: Author) -> Author:
        author.id = max(AUTHORS) + 1
        AUTHORS[author.id] = author
        return author


def make_schema(*, logged_in: bool, rights=()) -> strawberry.Schema:
    mapper = StrawberryTypeMapper()
    mapper.register(Author, AuthorType, input_type=AuthorInput)
    mapper.register(Post, PostType)
    provider = ControllerQueryProvider(
        BlogController(),
        type_mapper=mapper,
        authentication_service=StaticAuthenticationService(logged=logged_in),
        authorization_service=StaticAuthorizationService(rights),
    )
    return build_schema(provider)


async def main():
    """Main demo function."""
    logging.basicConfig(level=logging.DEBUG)

    anonymous = make_schema(logged_in=False)
    print(anonymous)

    result = await anonymous.execute("""
    query {
        author(id: 1) { id name }
        posts(tags: ["graphql", "python"]) { id title }
        latest { title }
    }
    """)
    if result.errors:
        print("Errors:", result.errors)
    else:
        print("Result:", result.data)

    editor = make_schema(logged_in=True, rights=['CAN_WRITE'])
    result = await editor.execute('mutation { addAuthor(author: {name: "Charlie Brown"}) { id name } }')
    if result.errors:
        print("Errors:", result.errors)
    else:
        print("Result:", result.data)


if __name__ == "__main__":
    asyncio.run(main())
