"""
buildsim - Building Renovation Simulator

Applies ordered renovation plans (solar panels, facade, insulation,
windows, green roof) to a building's height, cost, efficiency and
aesthetic value.

Modules:
    - core: Exceptions, logging, settings and improvement constants
    - domain: Pydantic models for buildings and improvements, boost calculators
    - application: Improvement factory and step-by-step renovation engine
    - verification: Fixed scenario runner
"""

__version__ = "0.1.0"
