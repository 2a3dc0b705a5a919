"""
Test data factories for oven control testing.

Usage:
    from tests.factories import ProgramFactory, create_single_stage_program

    factory = ProgramFactory()
    program = factory.create_program(stage_count=5)

    program = create_single_stage_program(HeatMode.GRILL, 5, 180)
"""

from .program_factory import (
    ProgramFactory,
    create_single_stage_program,
)

__all__ = [
    'ProgramFactory',
    'create_single_stage_program',
]
