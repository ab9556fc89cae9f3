"""Query documents sent by the client."""

BOOK_FIELDS = """
    id
    title
    author
    year
    genre
"""

GET_BOOKS = f"""
query GetBooks {{
  books {{{BOOK_FIELDS}}}
}}
"""

GET_BOOK = f"""
query GetBook($id: ID!) {{
  book(id: $id) {{{BOOK_FIELDS}}}
}}
"""

GET_AUTHORS = f"""
query GetAuthors {{
  authors {{
    id
    name
    books {{{BOOK_FIELDS}}}
  }}
}}
"""

GET_AUTHOR = f"""
query GetAuthor($id: ID!) {{
  author(id: $id) {{
    id
    name
    books {{{BOOK_FIELDS}}}
  }}
}}
"""

CREATE_BOOK = f"""
mutation CreateBook($title: String!, $author: String!, $year: Int, $genre: String) {{
  createBook(title: $title, author: $author, year: $year, genre: $genre) {{{BOOK_FIELDS}}}
}}
"""

DELETE_BOOK = """
mutation DeleteBook($id: ID!) {
  deleteBook(id: $id)
}
"""


def update_book_document(fields: list[str]) -> str:
    """Build an updateBook mutation declaring only the supplied arguments."""
    types = {"title": "String", "author": "String", "year": "Int", "genre": "String"}
    declared = ", ".join(["$id: ID!"] + [f"${name}: {types[name]}" for name in fields])
    arguments = ", ".join(["id: $id"] + [f"{name}: ${name}" for name in fields])
    return f"""
mutation UpdateBook({declared}) {{
  updateBook({arguments}) {{{BOOK_FIELDS}}}
}}
"""
