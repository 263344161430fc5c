"""create project, well, sector, personnel and operation tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-18 09:12:40.118203

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('projects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('number', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('basin', sa.String(length=255), nullable=True),
        sa.Column('crew', sa.String(length=255), nullable=True),
        sa.Column('field', sa.String(length=255), nullable=True),
        sa.Column('county', sa.String(length=255), nullable=True),
        sa.Column('state', sa.String(length=255), nullable=True),
        sa.Column('engineer', sa.String(length=255), nullable=True),
        sa.Column('pump_operator', sa.String(length=255), nullable=True),
        sa.Column('supervisor', sa.String(length=255), nullable=True),
        sa.Column('customer_rep', sa.String(length=255), nullable=True),
        sa.Column('completion_type', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_projects_id'), 'projects', ['id'], unique=False)
    op.create_index(op.f('ix_projects_number'), 'projects', ['number'], unique=True)

    op.create_table('wells',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), nullable=False),
        sa.Column('well_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('api_number', sa.String(length=64), nullable=True),
        sa.Column('planned_number_of_stages', sa.Integer(), nullable=True),
        sa.Column('color', sa.String(length=16), nullable=False),
        sa.Column('is_used', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('project_id', 'well_id', name='uq_wells_project_well')
    )
    op.create_index(op.f('ix_wells_id'), 'wells', ['id'], unique=False)
    op.create_index(op.f('ix_wells_well_id'), 'wells', ['well_id'], unique=False)

    op.create_table('sector_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), nullable=False),
        sa.Column('sector', sa.String(length=32), nullable=False),
        sa.Column('color', sa.String(length=16), nullable=False),
        sa.Column('is_used', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('project_id', 'sector', name='uq_sector_settings_project_sector')
    )
    op.create_index(op.f('ix_sector_settings_id'), 'sector_settings', ['id'], unique=False)

    op.create_table('personnel_members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_personnel_members_id'), 'personnel_members', ['id'], unique=False)

    op.create_table('operations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), nullable=False),
        sa.Column('well_id', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('sector', sa.String(length=32), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('stage', sa.Integer(), nullable=True),
        sa.Column('party', sa.String(length=64), nullable=True),
        sa.Column('main_event', sa.String(length=128), nullable=True),
        sa.Column('completion_type', sa.String(length=64), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('engineer', sa.String(length=255), nullable=True),
        sa.Column('pump_operator', sa.String(length=255), nullable=True),
        sa.Column('supervisor', sa.String(length=255), nullable=True),
        sa.Column('customer_rep', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_operations_id'), 'operations', ['id'], unique=False)
    op.create_index(op.f('ix_operations_project_id'), 'operations', ['project_id'], unique=False)
    op.create_index(op.f('ix_operations_well_id'), 'operations', ['well_id'], unique=False)
    op.create_index(op.f('ix_operations_start_time'), 'operations', ['start_time'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_operations_start_time'), table_name='operations')
    op.drop_index(op.f('ix_operations_well_id'), table_name='operations')
    op.drop_index(op.f('ix_operations_project_id'), table_name='operations')
    op.drop_index(op.f('ix_operations_id'), table_name='operations')
    op.drop_table('operations')
    op.drop_index(op.f('ix_personnel_members_id'), table_name='personnel_members')
    op.drop_table('personnel_members')
    op.drop_index(op.f('ix_sector_settings_id'), table_name='sector_settings')
    op.drop_table('sector_settings')
    op.drop_index(op.f('ix_wells_well_id'), table_name='wells')
    op.drop_index(op.f('ix_wells_id'), table_name='wells')
    op.drop_table('wells')
    op.drop_index(op.f('ix_projects_number'), table_name='projects')
    op.drop_index(op.f('ix_projects_id'), table_name='projects')
    op.drop_table('projects')
