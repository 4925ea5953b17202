"""Book endpoints."""

from fastapi import APIRouter, Depends, status

from schoolroster.core import book_service
from schoolroster.core.context import RequestContext
from schoolroster.web.deps import get_request_context
from schoolroster.web.schemas import (
    BookCreate,
    BookListResponse,
    BookResponse,
    BookUpdate,
    DeleteResponse,
)

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=BookListResponse)
async def list_books(assigned_to_student: str | None = None) -> BookListResponse:
    """List all books, optionally only those assigned to a student."""
    books = [
        BookResponse.model_validate(b)
        for b in book_service.list_books(assigned_to_student=assigned_to_student)
    ]
    return BookListResponse(books=books, count=len(books))


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str) -> BookResponse:
    """Get a specific book by ID."""
    return BookResponse.model_validate(book_service.get_book(book_id))


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_data: BookCreate,
    context: RequestContext = Depends(get_request_context),
) -> BookResponse:
    """Create a new book owned by the acting user."""
    book = book_service.create_book(context, book_data.model_dump())
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(book_id: str, book_data: BookUpdate) -> BookResponse:
    """Update the fields sent for a book."""
    book = book_service.update_book(book_id, book_data.model_dump(exclude_unset=True))
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", response_model=DeleteResponse)
async def delete_book(book_id: str) -> DeleteResponse:
    """Delete a book."""
    book_service.delete_book(book_id)
    return DeleteResponse(message="Book removed successfully", id=book_id)
