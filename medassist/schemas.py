from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Any, Dict, List, Literal, Optional


class CamelModel(BaseModel):
    """Request bodies arrive camelCased from the web client."""
    model_config = ConfigDict(populate_by_name=True)


# --- Auth ---

class RegisterReq(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)  # bcrypt input limit
    full_name: str = Field(alias="fullName", min_length=2)


class LoginReq(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserOut(CamelModel):
    id: int
    email: str
    full_name: str = Field(alias="fullName")
    role: str


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"


class AuthResponse(BaseModel):
    user: UserOut
    token: str
    refresh_token: str
    token_type: str = "Bearer"


# --- Profile ---

class EmergencyContact(BaseModel):
    name: str
    phone: str
    relationship: str


class ProfileUpdate(CamelModel):
    full_name: str = Field(alias="fullName", min_length=2)
    date_of_birth: Optional[date] = Field(default=None, alias="dateOfBirth")
    gender: Optional[Literal["male", "female", "other"]] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    blood_type: Optional[str] = Field(default=None, alias="bloodType")
    emergency_contact: Optional[EmergencyContact] = Field(default=None, alias="emergencyContact")
    medical_conditions: List[str] = Field(alias="medicalConditions")
    current_medications: List[str] = Field(alias="currentMedications")
    allergies: List[str]
    family_history: List[str] = Field(alias="familyHistory")


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    full_name: str
    email: str
    date_of_birth: Optional[date]
    gender: Optional[str]
    height: Optional[float]
    weight: Optional[float]
    blood_type: Optional[str]
    emergency_contact: Optional[Dict[str, Any]]
    medical_conditions: List[str]
    current_medications: List[str]
    allergies: List[str]
    family_history: List[str]
    onboarding_completed: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


# --- AI artifacts ---

class SymptomAnalyzeReq(CamelModel):
    symptoms: List[str]
    severity: Literal["mild", "moderate", "severe"]
    duration: str
    additional_notes: Optional[str] = Field(default=None, alias="additionalNotes")


class AssessmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    symptoms: List[str]
    severity: str
    duration: str
    additional_notes: Optional[str]
    ai_assessment: Dict[str, Any]
    created_at: Optional[datetime]


class RoadmapPreferences(CamelModel):
    activity_level: str = Field(alias="activityLevel")
    time_commitment: str = Field(alias="timeCommitment")
    focus_areas: List[str] = Field(alias="focusAreas")


class RoadmapReq(CamelModel):
    health_goals: List[str] = Field(alias="healthGoals")
    preferences: Optional[RoadmapPreferences] = None


class RoadmapOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    goals: Dict[str, Any]
    weekly_plan: List[Dict[str, Any]]
    recommendations: List[Any]
    status: str
    created_at: Optional[datetime]


class DietPreferences(CamelModel):
    diet_type: str = Field(alias="dietType")
    allergies: List[str]
    restrictions: List[str]
    health_conditions: List[str] = Field(alias="healthConditions")
    calorie_target: float = Field(alias="calorieTarget")
    cuisines: Optional[List[str]] = None


class DietPlanReq(BaseModel):
    preferences: DietPreferences


class DietPlanOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    preferences: Dict[str, Any]
    weekly_meals: Dict[str, Any]
    grocery_list: List[Any]
    nutritional_summary: Optional[Dict[str, Any]]
    status: str
    created_at: Optional[datetime]


# --- Providers ---

class ProviderCreate(BaseModel):
    name: str = Field(min_length=2, max_length=120)
    specialty: str = Field(min_length=2, max_length=120)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    accepted_insurance: List[str] = []
    languages: List[str] = []
    telemedicine_available: bool = False
    verified: bool = False


class ProviderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty: str
    address: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip_code: Optional[str]
    phone: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    rating: Optional[float]
    accepted_insurance: List[str]
    languages: List[str]
    telemedicine_available: bool
    verified: bool


class ProviderHit(ProviderOut):
    distance: float


class ProviderSearchQuery(BaseModel):
    # no range checks on coordinates
    latitude: float
    longitude: float
    radius: float = 25.0
    specialty: Optional[str] = None
    insurance: Optional[str] = None


class SearchResponse(BaseModel):
    count: int
    providers: List[ProviderHit]


class DashboardSummary(BaseModel):
    assessments: int
    roadmaps: int
    diet_plans: int
    latest_urgency: Optional[str]
    profile_complete: bool
