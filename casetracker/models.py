# casetracker/models.py
from datetime import datetime
from casetracker.extensions import db


# =====================================================
# ADMIN
# =====================================================

class AdminUser(db.Model):
    __tablename__ = "admin_users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(120), unique=True, nullable=False, index=True)
    fullname = db.Column(db.String(120), nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    role = db.Column(db.String(20), nullable=False, default="user", index=True)

    def __repr__(self):
        return self.username


# =====================================================
# PANELES (etiqueta visible de cada paso)
# =====================================================

class Panel(db.Model):
    __tablename__ = "panels"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), unique=True, nullable=False)

    def __repr__(self):
        return self.name


# =====================================================
# CASO (un candidato en proceso de contratación)
# =====================================================

class Case(db.Model):
    __tablename__ = "cases"

    id = db.Column(db.Integer, primary_key=True)

    candidate_fullname = db.Column(db.String(255), nullable=False)
    candidate_email = db.Column(db.String(255), nullable=False)
    due_date = db.Column(db.DateTime, nullable=True, index=True)
    applicant_has_been_notified = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    # 1 a N con WorkStep; el caso es dueño de sus pasos
    work_steps = db.relationship(
        "WorkStep",
        back_populates="case",
        order_by="WorkStep.step_number",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"Caso {self.id} - {self.candidate_fullname}"


# =====================================================
# WORK STEP (hijas de Case)
# =====================================================

class WorkStep(db.Model):
    __tablename__ = "work_steps"

    id = db.Column(db.Integer, primary_key=True)

    case_id = db.Column(
        db.Integer,
        db.ForeignKey("cases.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    panel_id = db.Column(db.Integer, db.ForeignKey("panels.id"), nullable=False)

    step_number = db.Column(db.Integer, nullable=False)
    is_current = db.Column(db.Boolean, nullable=False, default=False)
    due_date = db.Column(db.DateTime, nullable=True)
    all_requirements_complete = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    # Relación padre
    case = db.relationship("Case", back_populates="work_steps")
    panel = db.relationship("Panel")

    __table_args__ = (
        db.UniqueConstraint("case_id", "step_number", name="uq_work_steps_case_step"),
        db.Index(
            "idx_work_steps_current",
            "case_id",
            postgresql_where=db.text("is_current = TRUE")
        ),
    )

    def __repr__(self):
        return f"Paso {self.step_number} (caso {self.case_id})"
