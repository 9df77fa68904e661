# cafenet/domain/schemas.py
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from cafenet.utils.settings import DEFAULT_BILLING_HOURS


class Role(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"
    CUSTOMER = "customer"


class Package(str, Enum):
    REGULAR = "regular"
    PREMIUM = "premium"


class Category(str, Enum):
    MAKANAN = "makanan"
    MINUMAN = "minuman"
    CEMILAN = "cemilan"


class Session(BaseModel):
    """Zalogowana tozsamosc, trzymana w storage pod jednym kluczem."""

    id: int | str
    name: str
    role: Role

    model_config = ConfigDict(extra="ignore", frozen=True)


class UserSummary(BaseModel):
    id: int | str
    name: str
    username: str | None = None

    model_config = ConfigDict(extra="ignore")


class Room(BaseModel):
    id: int | str
    name: str
    room_type: Package
    is_occupied: bool = False

    model_config = ConfigDict(extra="ignore")


class Product(BaseModel):
    id: int | str
    title: str
    price: int = Field(..., ge=0, description="Cena w najmniejszej jednostce waluty")
    image_ref: str | None = Field(default=None, alias="image")
    category: Category | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BillingSnapshot(BaseModel):
    package: Package
    remaining_hours: float
    room_id: int | str

    model_config = ConfigDict(extra="ignore")


class BillingReceipt(BaseModel):
    """Odpowiedz backendu na utworzenie billingu; nieznane pola zostaja."""

    id: int | str | None = None
    customer_id: int | str | None = None
    room_id: int | str | None = None
    package: Package | None = None
    duration_hours: int | None = None

    model_config = ConfigDict(extra="allow")


class CheckoutItem(BaseModel):
    product_id: int | str
    quantity: int = Field(..., gt=0, serialization_alias="qty")

    model_config = ConfigDict(frozen=True)


class CheckoutResult(BaseModel):
    payment_code: str
    total: int

    model_config = ConfigDict(extra="ignore")


class AvailableRooms(BaseModel):
    regular: int = 0
    premium: int = 0


class Transaction(BaseModel):
    created_at: str | None = None
    total: int = 0
    payment_code: str | None = None

    model_config = ConfigDict(extra="ignore")


class AdminOverview(BaseModel):
    customers: List[UserSummary] = []
    staff: List[UserSummary] = []
    available_rooms: AvailableRooms = Field(default_factory=AvailableRooms)
    recent: List[Transaction] = []
    rooms: List[Room] = []

    model_config = ConfigDict(extra="ignore")


# request bodies for the dashboard routes

class LoginIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class BillingIn(BaseModel):
    """Schema dla formularza billingu (staff)."""

    customer_id: int | str | None = None
    room_id: int | str | None = None
    package: Package = Package.REGULAR
    duration_hours: int = DEFAULT_BILLING_HOURS


class CartItemIn(BaseModel):
    product_id: int | str
    category: Category = Category.MAKANAN
