"""Base ViewSet for endpoints backed by an application service.

Services are built once by ``config.container`` and bound to a ViewSet
class with ``bind``; the ViewSet never instantiates repositories or
services itself.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Type

from django.core.exceptions import ImproperlyConfigured
from rest_framework import serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import StandardResultsSetPagination


class ServiceViewSet(GenericViewSet):
    service: Any = None
    pagination_class = StandardResultsSetPagination
    lookup_value_regex = r"[0-9]+"

    @classmethod
    def bind(cls, service: Any) -> Type[ServiceViewSet]:
        """Return a subclass of this ViewSet wired to ``service``."""
        return type(cls.__name__, (cls,), {"service": service, "__module__": cls.__module__})

    def initial(self, request: Request, *args: Any, **kwargs: Any) -> None:
        if self.service is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} has no service; use {type(self).__name__}.bind()."
            )
        super().initial(request, *args, **kwargs)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def lookup_id(self) -> int:
        return int(self.kwargs[self.lookup_url_kwarg or self.lookup_field])

    def validated_query(
        self, serializer_class: Type[serializers.Serializer]
    ) -> Dict[str, Any]:
        """Validate ``request.query_params``; errors surface as HTTP 400."""
        serializer = serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def paginated_response(
        self,
        items: Iterable[Any],
        serializer_class: Optional[Type[serializers.BaseSerializer]] = None,
    ) -> Response:
        serializer_class = serializer_class or self.get_serializer_class()
        page = self.paginate_queryset(list(items))
        if page is None:
            return Response(serializer_class(items, many=True).data)
        return self.get_paginated_response(serializer_class(page, many=True).data)
