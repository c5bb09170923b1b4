"""
Unit tests for creature templates and the entity factory.
"""

from datetime import date

import pytest

from bestiary.core.data import (
    ActionType,
    ComponentType,
    CreatureKind,
    ResourceFlow,
    ResourceType,
)
from bestiary.core.errors import InvalidArgumentError
from bestiary.game.entities.creature_templates import (
    ActionProfile,
    CREATURE_TEMPLATES,
    create_creature_entity,
    get_template,
    load_creature_templates,
)


class TestBundledTemplates:
    """Test the shipped variant tuning."""

    def test_every_variant_has_a_template(self):
        assert set(CREATURE_TEMPLATES) == {CreatureKind.DRAGON, CreatureKind.ELF, CreatureKind.ORC}

    def test_dragon_template(self):
        template = get_template(CreatureKind.DRAGON)
        assert template.resource_type == ResourceType.FIRE_POWER
        assert (template.resource_min, template.resource_max) == (0, 100)
        assert template.action.action_type == ActionType.BREATHE_FIRE
        assert template.action.flow == ResourceFlow.SPEND
        assert template.action.required == 10
        assert template.action.resource_delta == -10
        assert template.action.damage == 20

    def test_elf_template(self):
        template = get_template(CreatureKind.ELF)
        assert template.resource_type == ResourceType.MANA
        assert (template.resource_min, template.resource_max) == (0, 50)
        assert template.action.required == 5
        assert template.action.resource_delta == -5
        assert template.action.damage == 10

    def test_orc_template(self):
        template = get_template(CreatureKind.ORC)
        assert template.resource_type == ResourceType.RAGE
        assert (template.resource_min, template.resource_max) == (0, 30)
        assert template.action.flow == ResourceFlow.BUILD
        assert template.action.required == 5
        assert template.action.resource_delta == 5
        assert template.action.empowered_damage == 30
        assert template.action.empowered_threshold == 20

    def test_plain_creature_has_no_template(self):
        with pytest.raises(KeyError):
            get_template(CreatureKind.CREATURE)


class TestActionProfile:
    """Test damage tier selection."""

    def test_single_tier(self):
        profile = ActionProfile(ActionType.CAST_SPELL, ResourceFlow.SPEND, 5, 5, 10)
        assert profile.damage_for(0) == 10
        assert profile.damage_for(50) == 10

    def test_empowered_tier_is_strictly_above_threshold(self):
        profile = get_template(CreatureKind.ORC).action
        assert profile.damage_for(20) == 15
        assert profile.damage_for(21) == 30


class TestLoadTemplates:
    """Test loading templates from custom files."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_creature_templates(str(tmp_path / "missing.yaml"))

    def test_missing_key(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("creature_templates:\n  DRAGON:\n    resource:\n      type: FIRE_POWER\n")
        with pytest.raises(KeyError):
            load_creature_templates(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(KeyError):
            load_creature_templates(str(path))

    def test_unknown_kind(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text(
            "creature_templates:\n"
            "  GOBLIN:\n"
            "    resource: {type: RAGE, min: 0, max: 30}\n"
            "    action: {type: BERSERK, flow: BUILD, required: 5, amount: 5, damage: 15}\n"
        )
        with pytest.raises(ValueError, match="GOBLIN"):
            load_creature_templates(str(path))

    def test_custom_tuning(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "creature_templates:\n"
            "  ELF:\n"
            "    resource: {type: MANA, min: 0, max: 80}\n"
            "    action: {type: CAST_SPELL, flow: SPEND, required: 8, amount: 8, damage: 12}\n"
        )
        templates = load_creature_templates(str(path))
        assert templates[CreatureKind.ELF].resource_max == 80
        assert templates[CreatureKind.ELF].action.damage == 12


class TestCreateCreatureEntity:
    """Test the validating entity factory."""

    def test_plain_creature_components(self):
        entity = create_creature_entity("Snik", date(2001, 4, 2), 40)
        assert entity.has_component(ComponentType.IDENTITY)
        assert entity.has_component(ComponentType.HEALTH)
        assert not entity.has_component(ComponentType.RESOURCE)

    def test_variant_gets_resource(self):
        entity = create_creature_entity("Smolder", date(2001, 4, 2), 40, CreatureKind.DRAGON, 30)
        resource = entity.require_component(ComponentType.RESOURCE)
        assert resource.current == 30  # type: ignore[attr-defined]

    def test_variant_without_resource_rejected(self):
        with pytest.raises(InvalidArgumentError):
            create_creature_entity("Smolder", date(2001, 4, 2), 40, CreatureKind.DRAGON)

    def test_plain_creature_with_resource_rejected(self):
        with pytest.raises(InvalidArgumentError):
            create_creature_entity("Snik", date(2001, 4, 2), 40, CreatureKind.CREATURE, 10)
