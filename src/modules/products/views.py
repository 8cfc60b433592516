"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes — the view never swallows generic exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.dtos import PaginationDTO
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _payload(request: Request) -> Dict[str, Any]:
    data = request.data
    if not isinstance(data, Mapping):
        raise TypeError("Request body must be a JSON object.")
    if hasattr(data, "dict"):
        return data.dict()
    return dict(data)


def _error(detail: str, code: int) -> Response:
    return Response({"detail": detail}, status=code)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer
    # Slugs may contain dots; only "/" ends the segment.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?limit=&offset="""
        try:
            pagination = PaginationDTO(
                limit=request.query_params.get("limit"),
                offset=request.query_params.get("offset"),
            )
        except PydanticValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        products = self._service.find_all(pagination)
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{id-or-slug}/"""
        if pk is None:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        try:
            products = self._service.find_one(pk)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO(**_payload(request))
        except (PydanticValidationError, TypeError) as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create(dto)
        except ProductAlreadyExists as exc:
            return _error(exc.detail, status.HTTP_400_BAD_REQUEST)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{id}/

        Both verbs merge the supplied fields onto the stored product.
        """
        try:
            dto = UpdateProductDTO(**_payload(request))
        except (PydanticValidationError, TypeError) as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        if pk is None:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        try:
            product = self._service.update(pk, dto)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        except ProductAlreadyExists as exc:
            return _error(exc.detail, status.HTTP_400_BAD_REQUEST)

        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{id}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{id}/"""
        if pk is None:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        try:
            message = self._service.remove(pk)
        except ProductNotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        return Response({"detail": message})
