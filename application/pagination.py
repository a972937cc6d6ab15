from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from domain.exceptions.currency import PaginationError

T = TypeVar('T')


def paginate(items: Sequence[T], page: int, page_size: int = 10) -> list[T]:
	"""Return the ``page``-th window (1-based) of ``items``.

	Pages below 1 are treated as page 1. A zero ``page_size`` gives an empty window.
	"""
	if page_size < 0:
		raise PaginationError(f'page_size must not be negative, got {page_size}')

	start = (max(page, 1) - 1) * page_size
	return list(items[start:start + page_size])


def page_count(total: int, page_size: int = 10) -> int:
	if page_size <= 0 or total <= 0:
		return 0
	return -(-total // page_size)


@dataclass(frozen=True)
class Page(Generic[T]):
	items: list[T]
	page: int
	page_size: int
	total: int

	@property
	def pages(self) -> int:
		return page_count(self.total, self.page_size)


def paginate_page(items: Sequence[T], page: int, page_size: int = 10) -> Page[T]:
	return Page(
		items=paginate(items, page, page_size),
		page=max(page, 1),
		page_size=page_size,
		total=len(items),
	)
