from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for the catalog tables."""


class ProductBrand(Base):
    __tablename__ = "product_brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"ProductBrand(id={self.id!r}, name={self.name!r})"


class ProductType(Base):
    __tablename__ = "product_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"ProductType(id={self.id!r}, name={self.name!r})"


class Product(Base):
    """
    A catalog product.

    Relations use ``lazy="raise"``: sessions are closed before results
    are returned, so a relation must be requested through
    ``Criteria.include`` or access fails loudly.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    description: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), index=True)
    picture_url: Mapped[str] = mapped_column(String(255), default="")
    product_type_id: Mapped[int] = mapped_column(
        ForeignKey("product_types.id"), index=True
    )
    product_brand_id: Mapped[int] = mapped_column(
        ForeignKey("product_brands.id"), index=True
    )

    product_type: Mapped[ProductType] = relationship(lazy="raise")
    product_brand: Mapped[ProductBrand] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
