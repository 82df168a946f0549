"""Pydantic schemas for orders.

This module exposes lightweight request/validation schemas used by the
orders API, and the read schemas used to serialize domain results.
"""

import re
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codes import CODE_RE
from .domain import OrderStatus

UNIQUE_CODE_RE = re.compile(CODE_RE)
MAX_PAGE_LIMIT = 100
MAX_TEST_ORDERS = 1000


class CreateOrderDTO(BaseModel):
    """Schema for creating an order.

    Attributes:
        product_id: Positive catalog item identifier. Must be a JSON
            number; numeric strings are rejected.
        product_name: Non-empty product label, surrounding whitespace
            stripped.
    """

    product_id: int = Field(gt=0, strict=True)
    product_name: str = Field(min_length=1, max_length=255)

    @field_validator("product_name")
    @classmethod
    def validate_product_name(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("product_name must not be blank")
        return v2


class UpdateStatusDTO(BaseModel):
    """Schema for a status change; any of the four statuses is accepted."""

    status: OrderStatus


class PageQueryDTO(BaseModel):
    """Pagination query parameters (``?page=&limit=``)."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=MAX_PAGE_LIMIT)


class GenerateTestOrdersDTO(BaseModel):
    """Query parameters for the test-order generator."""

    count: int = Field(default=50, ge=1, le=MAX_TEST_ORDERS)


class UniqueCodeDTO(BaseModel):
    """Path parameter holding a two-digit unique code."""

    unique_code: str

    @field_validator("unique_code")
    @classmethod
    def validate_unique_code(cls, v: str) -> str:
        if not UNIQUE_CODE_RE.fullmatch(v):
            raise ValueError("Invalid unique code format")
        return v


class OrderReadDTO(BaseModel):
    """Serialized view of a domain ``Order``."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    product_name: str
    price: int
    unique_code: str
    status: OrderStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CodeStatisticsDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_codes: int
    used_codes: int
    available_codes: int
    used_codes_list: list[str]
    available_codes_list: list[str]


class OrderStatisticsDTO(BaseModel):
    total_orders: int
    pending_orders: int
    paid_orders: int
    cancelled_orders: int
    completed_orders: int
    code_statistics: CodeStatisticsDTO
