"""Unit tests for buildsim.domain.models Pydantic models."""

import pytest
from pydantic import ValidationError

from buildsim.domain.models import (
    Building,
    FacadeRenovation,
    GreenRoof,
    Improvement,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)


class TestImprovementEffects:
    """Tests for the per-variant boost and cost formulas."""

    def test_solar_panels(self):
        """Solar panels boost efficiency only."""
        effect = SolarPanels(area=30).effect()
        assert effect.efficiency == pytest.approx(12.0)  # 0.6 * 20
        assert effect.aesthetic is None
        assert effect.cost == 3000.0

    def test_facade_renovation(self):
        """Facade renovation boosts aesthetic only."""
        effect = FacadeRenovation(level=3).effect()
        assert effect.efficiency is None
        assert effect.aesthetic == pytest.approx(4.5)  # 0.3 * 15
        assert effect.cost == 1500.0

    def test_insulation_upgrade(self):
        """Insulation boosts efficiency only."""
        effect = InsulationUpgrade(level=2).effect()
        assert effect.efficiency == pytest.approx(7.5)  # 0.3 * 25
        assert effect.aesthetic is None
        assert effect.cost == 800.0

    def test_window_replacement(self):
        """Windows share one boost between efficiency and aesthetic."""
        effect = WindowReplacement(count=10).effect()
        assert effect.efficiency == pytest.approx(5.0)  # 0.5 * 10
        assert effect.aesthetic == pytest.approx(2.5)  # 0.5 * 5
        assert effect.cost == 3000.0

    def test_green_roof(self):
        """Green roof uses separate boosts for efficiency and aesthetic."""
        effect = GreenRoof(area=25.0).effect()
        assert effect.efficiency == pytest.approx(11.25)  # 0.75 * 15
        assert effect.aesthetic == pytest.approx(5.0)  # 0.5 * 10
        assert effect.cost == 5000.0

    def test_boost_saturates(self):
        """Large parameters hit the 1.0 boost ceiling."""
        assert InsulationUpgrade(level=10).effect().efficiency == pytest.approx(25.0)
        assert FacadeRenovation(level=50).effect().aesthetic == pytest.approx(15.0)
        roof = GreenRoof(area=1000.0).effect()
        assert roof.efficiency == pytest.approx(15.0)
        assert roof.aesthetic == pytest.approx(10.0)

    def test_cost_keeps_growing_past_saturation(self):
        """Cost is linear even once the boost is capped."""
        assert SolarPanels(area=200).effect().cost == 20000.0
        assert SolarPanels(area=400).effect().cost == 40000.0

    def test_zero_parameter(self):
        """Zero parameter gives zero boost and zero cost."""
        effect = WindowReplacement(count=0).effect()
        assert effect.efficiency == 0.0
        assert effect.aesthetic == 0.0
        assert effect.cost == 0.0


class TestImprovementModel:
    """Tests for improvement construction and labels."""

    def test_descriptions(self):
        """Descriptions name the variant and its parameter."""
        assert SolarPanels(area=30).description() == "Solar Panels with area 30 sqm"
        assert FacadeRenovation(level=8).description() == "Facade Renovation with quality level 8"
        assert InsulationUpgrade(level=6).description() == "Insulation Upgrade with level 6"
        assert WindowReplacement(count=10).description() == "Window Replacement of 10 windows"
        assert GreenRoof(area=25.0).description() == "Green Roof with area 25.000000 sqm"

    def test_kind_tags(self):
        """Each variant exposes a stable kind tag."""
        assert SolarPanels.kind == "solar_panels"
        assert GreenRoof(area=1.0).kind == "green_roof"

    def test_frozen(self):
        """Parameters cannot change after construction."""
        panels = SolarPanels(area=30)
        with pytest.raises(ValidationError):
            panels.area = 50

    def test_negative_parameter_rejected(self):
        """Negative parameters should be rejected."""
        with pytest.raises(ValidationError):
            SolarPanels(area=-1)
        with pytest.raises(ValidationError):
            GreenRoof(area=-0.5)

    def test_missing_parameter(self):
        """Missing required field should raise error."""
        with pytest.raises(ValidationError):
            WindowReplacement()

    def test_base_is_abstract(self):
        """The base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Improvement()


class TestBuilding:
    """Tests for Building model."""

    def test_constructor_stores_verbatim(self, sample_building_data):
        """Attributes are stored as given, even above the cap."""
        sample_building_data["efficiency"] = 120.0
        b = Building(**sample_building_data)
        assert b.efficiency == 120.0
        assert b.height == 35.0

    def test_default_cap_from_settings(self, sample_building_data):
        """The default policy is capped at 100."""
        b = Building(**sample_building_data)
        assert b.efficiency_cap == 100.0

    def test_set_efficiency_capped(self, sample_building_data):
        """Capped policy clamps efficiency updates."""
        b = Building(**sample_building_data)
        b.set_efficiency(130.0)
        assert b.efficiency == 100.0
        b.set_efficiency(42.0)
        assert b.efficiency == 42.0

    def test_set_efficiency_uncapped(self, sample_building_data):
        """Uncapped policy stores any value."""
        b = Building(**sample_building_data, efficiency_cap=None)
        b.set_efficiency(130.0)
        assert b.efficiency == 130.0

    def test_plain_setters(self, sample_building_data):
        """Other attributes are plain assignments."""
        b = Building(**sample_building_data)
        b.cost = 1.0
        b.aesthetic = 500.0
        b.height = 12.5
        assert b.snapshot() == {"height": 12.5, "cost": 1.0, "efficiency": 55.0, "aesthetic": 500.0}

    def test_building_owns_plan(self, sample_building_data):
        """Mutating the caller's list does not change the building's plan."""
        plan = [SolarPanels(area=10)]
        b = Building(**sample_building_data, plan=plan)
        plan.append(FacadeRenovation(level=2))
        assert len(b.plan) == 1

    def test_describe_plan(self, sample_building_data):
        """describe_plan lists descriptions in order."""
        b = Building(
            **sample_building_data,
            plan=[WindowReplacement(count=4), SolarPanels(area=12)],
        )
        assert b.describe_plan() == [
            "Window Replacement of 4 windows",
            "Solar Panels with area 12 sqm",
        ]

    def test_plan_rejects_non_improvements(self, sample_building_data):
        """Plan entries must be improvements."""
        with pytest.raises(ValidationError):
            Building(**sample_building_data, plan=["solar"])


class TestRenovate:
    """Tests for Building.renovate."""

    def test_facade_renovation_only(self):
        """Facade raises aesthetic and adds 500 per level."""
        b = Building(height=25.0, cost=75000, efficiency=50, aesthetic=40, plan=[FacadeRenovation(level=8)])
        b.renovate()
        assert b.aesthetic > 40
        assert b.cost == 79000
        assert b.efficiency == 50

    def test_efficiency_cap(self):
        """Efficiency stops at 100 under the capped policy."""
        b = Building(height=20.0, cost=50000, efficiency=80, aesthetic=60, plan=[SolarPanels(area=200)])
        b.renovate()
        assert b.efficiency == 100
        assert b.cost == 70000

    def test_efficiency_uncapped(self):
        """Without a cap the full boost is kept."""
        b = Building(
            height=20.0, cost=50000, efficiency=95, aesthetic=60,
            plan=[SolarPanels(area=200)], efficiency_cap=None,
        )
        b.renovate()
        assert b.efficiency == pytest.approx(115.0)

    def test_green_roof_effect(self):
        """Green roof raises efficiency and aesthetic."""
        b = Building(height=18.0, cost=55000, efficiency=65, aesthetic=55, plan=[GreenRoof(area=25.0)])
        b.renovate()
        assert b.cost == 60000
        assert b.efficiency > 65
        assert b.aesthetic > 55

    def test_empty_plan_is_identity(self):
        """An empty plan leaves every attribute unchanged."""
        b = Building(height=40.0, cost=120000, efficiency=75, aesthetic=85, plan=[])
        b.renovate()
        assert b.snapshot() == {"height": 40.0, "cost": 120000, "efficiency": 75, "aesthetic": 85}

    def test_cap_clips_before_later_gain(self):
        """A clipped gain is lost even if later steps add efficiency."""
        b = Building(
            height=10.0, cost=0, efficiency=90, aesthetic=0,
            plan=[SolarPanels(area=50), InsulationUpgrade(level=0)],
        )
        b.renovate()
        assert b.efficiency == 100

    def test_aesthetic_only_variant_keeps_overcap_efficiency(self):
        """Variants that do not touch efficiency never clamp it."""
        b = Building(height=10.0, cost=0, efficiency=120, aesthetic=0, plan=[FacadeRenovation(level=1)])
        b.renovate()
        assert b.efficiency == 120

    def test_renovate_twice_applies_twice(self):
        """Each renovate call applies the whole plan again."""
        b = Building(height=10.0, cost=0, efficiency=0, aesthetic=0, plan=[InsulationUpgrade(level=1)])
        b.renovate()
        b.renovate()
        assert b.cost == 800
        assert b.efficiency == pytest.approx(7.5)
