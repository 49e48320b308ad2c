"""create employees and attendance entries

Revision ID: 3f9b2c1d7a64
Revises: 
Create Date: 2026-10-17 10:12:40.118302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9b2c1d7a64'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=True),
        sa.Column('tasks_completed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('performance_score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('salary', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('da_increment', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_employees_id', 'employees', ['id'])
    op.create_index('ix_employees_user_id', 'employees', ['user_id'])

    op.create_table(
        'attendance_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
    )
    op.create_index('ix_attendance_entries_id', 'attendance_entries', ['id'])
    op.create_index('ix_attendance_entries_employee_id', 'attendance_entries', ['employee_id'])


def downgrade() -> None:
    op.drop_index('ix_attendance_entries_employee_id', table_name='attendance_entries')
    op.drop_index('ix_attendance_entries_id', table_name='attendance_entries')
    op.drop_table('attendance_entries')
    op.drop_index('ix_employees_user_id', table_name='employees')
    op.drop_index('ix_employees_id', table_name='employees')
    op.drop_table('employees')
