from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_base'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # admin_users
    op.create_table(
        'admin_users',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('username', sa.String(120), nullable=False, unique=True),
        sa.Column('fullname', sa.String(120), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('role', sa.String(20), nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.text('NOW()'))
    )
    op.create_index('ix_admin_users_username', 'admin_users', ['username'])
    op.create_index('ix_admin_users_role', 'admin_users', ['role'])

    # catálogo de paneles
    op.create_table(
        'panels',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(150), nullable=False, unique=True)
    )

    # casos
    op.create_table(
        'cases',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('candidate_fullname', sa.String(255), nullable=False),
        sa.Column('candidate_email', sa.String(255), nullable=False),
        sa.Column('due_date', sa.DateTime, nullable=True),
        sa.Column('applicant_has_been_notified', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime, nullable=False, server_default=sa.text('NOW()'))
    )

    # pasos de cada caso
    op.create_table(
        'work_steps',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('case_id', sa.Integer, sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('panel_id', sa.Integer, sa.ForeignKey('panels.id'), nullable=False),
        sa.Column('step_number', sa.Integer, nullable=False),
        sa.Column('is_current', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('due_date', sa.DateTime, nullable=True),
        sa.Column('all_requirements_complete', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime, nullable=False, server_default=sa.text('NOW()'))
    )
    op.create_index('ix_work_steps_case_id', 'work_steps', ['case_id'])


def downgrade():
    op.drop_index('ix_work_steps_case_id', table_name='work_steps')
    op.drop_table('work_steps')
    op.drop_table('cases')
    op.drop_table('panels')
    op.drop_index('ix_admin_users_role', table_name='admin_users')
    op.drop_index('ix_admin_users_username', table_name='admin_users')
    op.drop_table('admin_users')
