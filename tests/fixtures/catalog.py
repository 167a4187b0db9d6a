"""Small product catalog used across search and filter tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from generic_search import Field, SearchPath


class Store(BaseModel):
    name: str
    city: str | None = None


class Product(BaseModel):
    name: str
    category: str | None = None
    stores: list[Store] = []
    tags: list[str] = []


@dataclass
class Shelf:
    """Plain dataclass record, to mix record shapes in one search."""

    label: str
    products: list[Product] = field(default_factory=list)


class Address(BaseModel):
    city: str


class Customer(BaseModel):
    """Record holding a single nested object rather than a collection."""

    name: str
    address: Address


@dataclass
class PlainAddress:
    city: str


@dataclass
class PlainCustomer:
    name: str
    address: PlainAddress


NAME = SearchPath(Field("name"))
CATEGORY = SearchPath(Field("category"))
STORE_NAME = SearchPath(Field("stores"), SearchPath(Field("name")))
STORE_CITY = SearchPath.parse("stores[].city")
TAGS = SearchPath.parse("tags[]")
ADDRESS_CITY = SearchPath.parse("address.city")

PRODUCT_PATHS = [NAME, CATEGORY, STORE_NAME, STORE_CITY, TAGS]


def build_catalog() -> list[Product]:
    return [
        Product(
            name="Lamp",
            category="Lighting",
            stores=[Store(name="Acme", city="Springfield")],
            tags=["desk", "led"],
        ),
        Product(
            name="Chair",
            category="Furniture",
            stores=[Store(name="Bolt", city="Shelbyville")],
            tags=["oak"],
        ),
        Product(
            name="Table lamp",
            category="Lighting",
            stores=[Store(name="Acme", city="Springfield"), Store(name="Lumen", city="Capital City")],
            tags=["desk"],
        ),
        Product(
            name="Teddy bear",
            category="Toys",
            stores=[Store(name="Toys", city="Ogdenville"), Store(name="Toys", city="North Haverbrook")],
        ),
    ]
