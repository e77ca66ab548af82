from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=128), nullable=False),
        sa.Column("full_name", sa.String(length=120), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="patient"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("full_name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("date_of_birth", sa.Date, nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=True),
        sa.Column("height", sa.Float, nullable=True),
        sa.Column("weight", sa.Float, nullable=True),
        sa.Column("blood_type", sa.String(length=8), nullable=True),
        sa.Column("emergency_contact", sa.JSON, nullable=True),
        sa.Column("medical_conditions", sa.JSON, nullable=False),
        sa.Column("current_medications", sa.JSON, nullable=False),
        sa.Column("allergies", sa.JSON, nullable=False),
        sa.Column("family_history", sa.JSON, nullable=False),
        sa.Column("onboarding_completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "symptom_assessments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("symptoms", sa.JSON, nullable=False),
        sa.Column("severity", sa.String(length=16), nullable=False),
        sa.Column("duration", sa.String(length=120), nullable=False),
        sa.Column("additional_notes", sa.Text, nullable=True),
        sa.Column("ai_assessment", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_symptom_assessments_user_id", "symptom_assessments", ["user_id"])
    op.create_table(
        "health_roadmaps",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("goals", sa.JSON, nullable=False),
        sa.Column("weekly_plan", sa.JSON, nullable=False),
        sa.Column("recommendations", sa.JSON, nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_health_roadmaps_user_id", "health_roadmaps", ["user_id"])
    op.create_table(
        "diet_plans",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("preferences", sa.JSON, nullable=False),
        sa.Column("weekly_meals", sa.JSON, nullable=False),
        sa.Column("grocery_list", sa.JSON, nullable=False),
        sa.Column("nutritional_summary", sa.JSON, nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_diet_plans_user_id", "diet_plans", ["user_id"])
    op.create_table(
        "healthcare_providers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("specialty", sa.String(length=120), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=80), nullable=True),
        sa.Column("state", sa.String(length=32), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("rating", sa.Float, nullable=True),
        sa.Column("accepted_insurance", sa.JSON, nullable=False),
        sa.Column("languages", sa.JSON, nullable=False),
        sa.Column("telemedicine_available", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("verified", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_healthcare_providers_specialty", "healthcare_providers", ["specialty"])


def downgrade() -> None:
    op.drop_index("ix_healthcare_providers_specialty", table_name="healthcare_providers")
    op.drop_table("healthcare_providers")
    op.drop_index("ix_diet_plans_user_id", table_name="diet_plans")
    op.drop_table("diet_plans")
    op.drop_index("ix_health_roadmaps_user_id", table_name="health_roadmaps")
    op.drop_table("health_roadmaps")
    op.drop_index("ix_symptom_assessments_user_id", table_name="symptom_assessments")
    op.drop_table("symptom_assessments")
    op.drop_table("user_profiles")
    op.drop_table("users")
