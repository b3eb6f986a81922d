from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_text(value):
    # Prices arrive as JSON numbers or strings; both are stored as text.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


PriceText = Annotated[str, BeforeValidator(_as_text)]
Status = Literal["Active", "Inactive"]
ServiceTypeName = Literal["Takeaway", "Dinein", "Delivery", "All"]


class MenuModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class Scope(MenuModel):
    mid: str = Field(alias="MID")
    sid: str = Field(alias="SID")


# ---- Category ----

class CategoryCreate(Scope):
    category_name: str = Field(alias="categoryName")
    status: Status
    service_type: ServiceTypeName = Field(alias="serviceType")


class CategoryQuery(Scope):
    service_type: ServiceTypeName = Field(alias="serviceType")


class CategorySearch(Scope):
    category_name: str = Field(alias="categoryName")


class CategoryStatus(MenuModel):
    category_id: str = Field(alias="categoryId")


class CategoryUpdate(MenuModel):
    category_id: str = Field(alias="categoryId")
    category_name: str = Field(alias="categoryName")
    service_type: ServiceTypeName = Field(alias="serviceType")


# ---- Item ----

class ItemCreate(Scope):
    category_id: str = Field(alias="categoryId")
    item_name: str = Field(alias="itemName")
    item_price: PriceText = Field(alias="itemPrice")
    status: Status
    item_description: str = Field(default="", alias="itemDescription")
    tag: str = ""
    image_url: str = Field(default="", alias="imageUrl")


class ItemSearch(Scope):
    item_name: str = Field(alias="itemName")


class ItemRef(MenuModel):
    item_id: str = Field(alias="itemId")


class CategoryRef(MenuModel):
    category_id: str = Field(alias="categoryId")


class ItemUpdate(MenuModel):
    item_id: str = Field(alias="itemId")
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    item_name: Optional[str] = Field(default=None, alias="itemName")
    item_description: Optional[str] = Field(default=None, alias="itemDescription")
    item_price: Optional[PriceText] = Field(default=None, alias="itemPrice")
    tag: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


# ---- Variants ----

class VariantTitleCreate(Scope):
    category_id: str = Field(alias="categoryId")
    variant_name: str = Field(alias="variantName")
    status: Status
    item_id: Optional[str] = Field(default=None, alias="itemId")


class VariantTitleRef(MenuModel):
    variant_title_id: str = Field(alias="variantTitleId")


class VariantTitleUpdate(VariantTitleRef):
    variant_name: str = Field(alias="variantName")


class VariantItemCreate(Scope):
    category_id: str = Field(alias="categoryId")
    variant_item: str = Field(alias="variantItem")
    variant_item_price: PriceText = Field(alias="variantItemPrice")
    status: Status
    item_id: Optional[str] = Field(default=None, alias="itemId")
    variant_title_id: Optional[str] = Field(default=None, alias="variantTitleId")


class VariantItemRef(MenuModel):
    variant_item_id: str = Field(alias="variantItemId")


class VariantItemUpdate(VariantItemRef):
    variant_item: Optional[str] = Field(default=None, alias="variantItem")
    variant_item_price: Optional[PriceText] = Field(default=None, alias="variantItemPrice")
    variant_title_id: Optional[str] = Field(default=None, alias="variantTitleId")


# ---- Service types & taxes ----

class MerchantRef(MenuModel):
    mid: str = Field(alias="MID")


class ServiceTypeCreate(MerchantRef):
    service_type: str = Field(alias="serviceType")


class TaxCreate(MerchantRef):
    tax_name: str = Field(alias="taxName")
    tax_value: float = Field(alias="taxValue")
    value_type: str = Field(alias="valueType")

