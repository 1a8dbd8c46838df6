"""Índices del listado de casos.

El listado carga todos los pasos de cada caso por case_id (selectin) y el
paso actual se busca por (case_id, is_current).
"""
from alembic import op
import sqlalchemy as sa

revision = '0003_listing_indexes'
down_revision = '0002_seed_admin'
branch_labels = None
depends_on = None


def upgrade():
    # Un número de paso por caso
    op.create_unique_constraint(
        'uq_work_steps_case_step', 'work_steps', ['case_id', 'step_number']
    )

    # Paso actual por caso (parcial: solo filas con is_current)
    op.create_index(
        'idx_work_steps_current',
        'work_steps',
        ['case_id'],
        postgresql_where=sa.text('is_current = TRUE')
    )

    # Orden / filtro por vencimiento
    op.create_index('ix_cases_due_date', 'cases', ['due_date'])


def downgrade():
    op.drop_index('ix_cases_due_date', table_name='cases')
    op.drop_index('idx_work_steps_current', table_name='work_steps')
    op.drop_constraint('uq_work_steps_case_step', 'work_steps', type_='unique')
