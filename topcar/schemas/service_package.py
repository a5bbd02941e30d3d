# topcar/schemas/service_package.py

from typing import List, Literal, Optional

from pydantic import FiniteFloat

from topcar.schemas.common import CamelModel

ServiceCategory = Literal["basic", "interior", "full", "premium"]


# Admin creates a package
class ServicePackageCreate(CamelModel):
    name: str
    description: str
    base_price: FiniteFloat
    premium_price: Optional[FiniteFloat] = None   # defaults to base price + 30%
    duration: Optional[int] = None          # minutes, defaults to 120
    category: Optional[ServiceCategory] = None
    inclusions: Optional[List[str]] = None


# Admin updates a package (partial)
class ServicePackageUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    base_price: Optional[FiniteFloat] = None
    premium_price: Optional[FiniteFloat] = None
    duration: Optional[int] = None
    category: Optional[ServiceCategory] = None
    inclusions: Optional[List[str]] = None


# What API returns
class ServicePackageResponse(CamelModel):
    id: str
    name: str
    description: str
    inclusions: List[str]
    base_price: float
    premium_price: float
    duration: int
    category: str
