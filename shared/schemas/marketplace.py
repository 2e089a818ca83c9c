"""
Marketplace data schemas for MercaTech PR

Pydantic models mirroring the rows owned by the hosted database:
profiles, listings, favorites and reports.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from enum import Enum


class Municipio(str, Enum):
    """Puerto Rico municipalities"""
    ADJUNTAS = "Adjuntas"
    AGUADA = "Aguada"
    AGUADILLA = "Aguadilla"
    AGUAS_BUENAS = "Aguas Buenas"
    AIBONITO = "Aibonito"
    ANASCO = "Añasco"
    ARECIBO = "Arecibo"
    ARROYO = "Arroyo"
    BARCELONETA = "Barceloneta"
    BARRANQUITAS = "Barranquitas"
    BAYAMON = "Bayamón"
    CABO_ROJO = "Cabo Rojo"
    CAGUAS = "Caguas"
    CAMUY = "Camuy"
    CANOVANAS = "Canóvanas"
    CAROLINA = "Carolina"
    CATANO = "Cataño"
    CAYEY = "Cayey"
    CEIBA = "Ceiba"
    CIALES = "Ciales"
    CIDRA = "Cidra"
    COAMO = "Coamo"
    COMERIO = "Comerío"
    COROZAL = "Corozal"
    CULEBRA = "Culebra"
    DORADO = "Dorado"
    FAJARDO = "Fajardo"
    FLORIDA = "Florida"
    GUANICA = "Guánica"
    GUAYAMA = "Guayama"
    GUAYANILLA = "Guayanilla"
    GUAYNABO = "Guaynabo"
    GURABO = "Gurabo"
    HATILLO = "Hatillo"
    HORMIGUEROS = "Hormigueros"
    HUMACAO = "Humacao"
    ISABELA = "Isabela"
    JAYUYA = "Jayuya"
    JUANA_DIAZ = "Juana Díaz"
    JUNCOS = "Juncos"
    LAJAS = "Lajas"
    LARES = "Lares"
    LAS_MARIAS = "Las Marías"
    LAS_PIEDRAS = "Las Piedras"
    LOIZA = "Loíza"
    LUQUILLO = "Luquillo"
    MANATI = "Manatí"
    MARICAO = "Maricao"
    MAUNABO = "Maunabo"
    MAYAGUEZ = "Mayagüez"
    MOCA = "Moca"
    MOROVIS = "Morovis"
    NAGUABO = "Naguabo"
    NARANJITO = "Naranjito"
    OROCOVIS = "Orocovis"
    PATILLAS = "Patillas"
    PENUELAS = "Peñuelas"
    PONCE = "Ponce"
    QUEBRADILLAS = "Quebradillas"
    RINCON = "Rincón"
    RIO_GRANDE = "Río Grande"
    SABANA_GRANDE = "Sabana Grande"
    SALINAS = "Salinas"
    SAN_GERMAN = "San Germán"
    SAN_JUAN = "San Juan"
    SAN_LORENZO = "San Lorenzo"
    SAN_SEBASTIAN = "San Sebastián"
    SANTA_ISABEL = "Santa Isabel"
    TOA_ALTA = "Toa Alta"
    TOA_BAJA = "Toa Baja"
    TRUJILLO_ALTO = "Trujillo Alto"
    UTUADO = "Utuado"
    VEGA_ALTA = "Vega Alta"
    VEGA_BAJA = "Vega Baja"
    VIEQUES = "Vieques"
    VILLALBA = "Villalba"
    YABUCOA = "Yabucoa"
    YAUCO = "Yauco"


class Category(str, Enum):
    """Listing categories"""
    SMARTPHONES = "Smartphones"
    LAPTOPS = "Laptops"
    TABLETS = "Tablets"
    DESKTOP_COMPUTERS = "Desktop Computers"
    GAMING_CONSOLES = "Gaming Consoles"
    TVS = "TVs"
    AUDIO_EQUIPMENT = "Audio Equipment"
    CAMERAS = "Cameras"
    SMART_HOME = "Smart Home"
    ACCESSORIES = "Accessories"
    COMPONENTS = "Components"
    NETWORKING = "Networking"
    WEARABLES = "Wearables"
    OTHER = "Other"


class Condition(str, Enum):
    """Item condition"""
    NEW = "New"
    LIKE_NEW = "Like New"
    GOOD = "Good"
    FAIR = "Fair"
    FOR_PARTS = "For Parts"


class ContactPreference(str, Enum):
    """How a seller prefers to be contacted"""
    WHATSAPP = "WhatsApp"
    EMAIL = "Email"
    PHONE = "Phone"
    MESSAGES = "Messages"


MUNICIPIOS: List[Municipio] = list(Municipio)
CATEGORIES: List[Category] = list(Category)
CONDITIONS: List[Condition] = list(Condition)
CONTACT_PREFERENCES: List[ContactPreference] = list(ContactPreference)


class Profile(BaseModel):
    """Per-user account record, one row per auth user"""
    id: str
    display_name: str = Field(..., min_length=1, max_length=100)
    municipio: Municipio
    contact_preference: ContactPreference
    contact_info: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class Listing(BaseModel):
    """A for-sale post created by a user"""
    id: str
    user_id: str
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    category: Category
    condition: Condition
    price: float = Field(..., ge=0)
    municipio: Municipio
    images: List[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    # Joined data
    profile: Optional[Profile] = None

    class Config:
        from_attributes = True


class Favorite(BaseModel):
    """A user's saved listing"""
    id: str
    user_id: str
    listing_id: str
    created_at: datetime

    # Joined data
    listing: Optional[Listing] = None


class Report(BaseModel):
    """A complaint filed against a listing"""
    id: str
    reporter_id: str
    listing_id: str
    reason: str
    description: Optional[str] = None
    status: str
    created_at: datetime
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None

    # Joined data
    listing: Optional[Listing] = None
    reporter: Optional[Profile] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_at is not None


class CreateListingForm(BaseModel):
    """Form payload for publishing a listing"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    category: Category
    condition: Condition
    price: float = Field(..., ge=0)
    municipio: Municipio
    images: List[str] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title is required')
        return v.strip()


class ProfileSetupForm(BaseModel):
    """Form payload submitted after first sign-in"""
    display_name: str = Field(..., min_length=1, max_length=100)
    municipio: Municipio
    contact_preference: ContactPreference
    contact_info: Optional[str] = None

    @field_validator('display_name')
    @classmethod
    def validate_display_name(cls, v):
        if not v.strip():
            raise ValueError('Display name is required')
        return v.strip()


class ProfileUpdate(BaseModel):
    """Partial profile update, identity and timestamps excluded"""
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    municipio: Optional[Municipio] = None
    contact_preference: Optional[ContactPreference] = None
    contact_info: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: Optional[bool] = None


class ReportForm(BaseModel):
    """Form payload for reporting a listing"""
    reason: str = Field(..., min_length=1)
    description: Optional[str] = None
