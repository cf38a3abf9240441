"""
Pagination utilities for the project.

Defines a default page number pagination class used across DRF
endpoints.  The page size is controlled centrally in settings rather than
duplicated throughout the codebase.
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """A simple page number paginator with a default page size."""
    page_size = settings.MESSAGE_PAGE_SIZE

    def get_page_payload(self, data):
        return {
            "count": self.page.paginator.count,
            "current_page": self.page.number,
            "last_page": self.page.paginator.num_pages,
            "per_page": self.get_page_size(self.request),
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data,
        }
