"""
Unit tests for combat action resolution.

Covers each variant action, dispatch by kind, failure atomicity,
emitted events and concurrent use of one actor.
"""

import threading

import pytest

from bestiary.core.data import ActionType
from bestiary.core.errors import (
    InsufficientResourceError,
    InvalidArgumentError,
    LowFirePowerError,
    LowManaError,
    LowRageError,
)
from bestiary.core.events import EventType
from bestiary.game.combat import ACTION_HANDLERS, perform_action
from bestiary.game.combat.actions import validate_target
from bestiary.game.entities import Dragon, Elf, Orc


class TestBreatheFire:
    """Test the Dragon's fire attack."""

    def test_spends_fire_power_and_deals_damage(self, dragon, target):
        result = dragon.breathe_fire(target)
        assert dragon.fire_power == 40
        assert target.health == 80
        assert result.action_type == ActionType.BREATHE_FIRE
        assert (result.resource_before, result.resource_after) == (50, 40)
        assert result.damage == 20

    def test_exact_cost_empties_fire_power(self, birth_date, make_target):
        dragon = Dragon("Smolder", birth_date, 90, 10)
        target = make_target(25)
        dragon.breathe_fire(target)
        assert dragon.fire_power == 0
        assert target.health == 5

    def test_low_fire_power_changes_nothing(self, birth_date, target):
        dragon = Dragon("Smolder", birth_date, 90, 5)
        with pytest.raises(LowFirePowerError) as exc_info:
            dragon.breathe_fire(target)
        assert dragon.fire_power == 5
        assert target.health == 100
        assert exc_info.value.current == 5
        assert exc_info.value.required == 10
        assert "FirePower=5" in str(exc_info.value)


class TestCastSpell:
    """Test the Elf's spell."""

    def test_spends_mana_and_deals_damage(self, elf, target):
        elf.cast_spell(target)
        assert elf.mana == 15
        assert target.health == 90

    def test_overkill_clamps_target(self, elf, make_target):
        target = make_target(3)
        result = elf.cast_spell(target)
        assert target.health == 0
        assert result.damage == 10
        assert result.damage_dealt == 3
        assert result.target_defeated

    def test_low_mana_changes_nothing(self, birth_date, target):
        elf = Elf("Elowen", birth_date, 70, 4)
        with pytest.raises(LowManaError):
            elf.cast_spell(target)
        assert elf.mana == 4
        assert target.health == 100


class TestBerserk:
    """Test the Orc's berserk attack."""

    @pytest.mark.parametrize("rage_before,rage_after,damage", [
        (5, 10, 15),
        (10, 15, 15),
        (15, 20, 15),
        (16, 21, 30),
        (18, 23, 30),
        (28, 30, 30),
        (30, 30, 30),
    ])
    def test_rage_and_damage(self, birth_date, make_target, rage_before, rage_after, damage):
        orc = Orc("Gruk", birth_date, 85, rage_before)
        target = make_target(100)
        result = orc.berserk(target)
        assert orc.rage == rage_after
        assert result.damage == damage
        assert target.health == 100 - damage

    def test_low_rage_changes_nothing(self, birth_date, target):
        orc = Orc("Gruk", birth_date, 85, 4)
        with pytest.raises(LowRageError):
            orc.berserk(target)
        assert orc.rage == 4
        assert target.health == 100

    def test_low_rage_is_an_insufficient_resource_error(self, birth_date, target):
        orc = Orc("Gruk", birth_date, 85, 0)
        with pytest.raises(InsufficientResourceError):
            orc.berserk(target)


class TestTargetValidation:
    """Test invalid and unusual targets."""

    @pytest.mark.parametrize("bad_target", [None, "goblin", 42])
    def test_invalid_target_changes_nothing(self, dragon, elf, orc, bad_target):
        for action, creature in ((dragon.breathe_fire, dragon), (elf.cast_spell, elf), (orc.berserk, orc)):
            before = creature.resource.current
            with pytest.raises(InvalidArgumentError):
                action(bad_target)
            assert creature.resource.current == before

    def test_validate_target_message(self):
        with pytest.raises(InvalidArgumentError, match="Target must not be None"):
            validate_target(None)

    def test_self_target(self, dragon):
        dragon.breathe_fire(dragon)
        assert dragon.health == 70
        assert dragon.fire_power == 40

    def test_dead_target(self, dragon, make_target):
        target = make_target(5)
        target.take_damage(5)
        result = dragon.breathe_fire(target)
        assert result.damage_dealt == 0
        assert target.health == 0
        assert dragon.fire_power == 40

    def test_dead_actor_can_act(self, elf, target):
        elf.take_damage(100)
        elf.cast_spell(target)
        assert target.health == 90

    def test_variant_target(self, dragon, orc):
        dragon.breathe_fire(orc)
        assert orc.health == 65


class TestPerformAction:
    """Test dispatch on the actor's kind."""

    def test_handlers_cover_variants(self):
        assert {kind.name for kind in ACTION_HANDLERS} == {"DRAGON", "ELF", "ORC"}

    def test_dispatch_uses_variant_action(self, dragon, elf, orc, target):
        assert perform_action(dragon, target).action_type == ActionType.BREATHE_FIRE
        assert perform_action(elf, target).action_type == ActionType.CAST_SPELL
        assert perform_action(orc, target).action_type == ActionType.BERSERK
        assert target.health == 100 - 20 - 10 - 15

    def test_plain_creature_has_no_action(self, make_target, target):
        with pytest.raises(InvalidArgumentError):
            perform_action(make_target(50, "Snik"), target)

    def test_non_creature_actor(self, target):
        with pytest.raises(InvalidArgumentError):
            perform_action("dragon", target)  # type: ignore[arg-type]

    def test_wrong_kind_actor(self, elf, target):
        with pytest.raises(InvalidArgumentError):
            ACTION_HANDLERS[Dragon.kind](elf, target)
        assert elf.mana == 20


class TestActionEvents:
    """Test events published by actions."""

    def test_success_events(self, event_manager, birth_date, make_target):
        events = []
        event_manager.subscribe_all(events.append)
        dragon = Dragon("Smolder", birth_date, 90, 50, event_manager)
        target = make_target(100)
        dragon.breathe_fire(target)
        event_manager.process_events()

        types = [e.event_type for e in events]
        assert EventType.RESOURCE_CHANGED in types
        performed = [e for e in events if e.event_type == EventType.ACTION_PERFORMED]
        assert len(performed) == 1
        assert performed[0].actor is dragon
        assert performed[0].target is target
        assert performed[0].damage == 20

    def test_failure_event(self, event_manager, birth_date, target):
        events = []
        event_manager.subscribe(EventType.ACTION_FAILED, events.append)
        orc = Orc("Gruk", birth_date, 85, 4, event_manager)
        with pytest.raises(LowRageError):
            orc.berserk(target)
        event_manager.process_events()

        assert len(events) == 1
        assert events[0].action_type == ActionType.BERSERK
        assert "Rage=4" in events[0].reason

    def test_capped_rage_publishes_no_resource_change(self, event_manager, birth_date, target):
        events = []
        event_manager.subscribe(EventType.RESOURCE_CHANGED, events.append)
        orc = Orc("Gruk", birth_date, 85, 30, event_manager)
        orc.berserk(target)
        event_manager.process_events()
        assert events == []


class TestConcurrentActions:
    """Test that concurrent actions on one actor never overspend."""

    def test_fire_power_is_never_overspent(self, birth_date, make_target):
        dragon = Dragon("Smolder", birth_date, 90, 100)
        target = make_target(100)
        successes = []
        failures = []
        lock = threading.Lock()
        start = threading.Barrier(25)

        def attack():
            start.wait()
            try:
                dragon.breathe_fire(target)
            except LowFirePowerError:
                with lock:
                    failures.append(1)
            else:
                with lock:
                    successes.append(1)

        threads = [threading.Thread(target=attack) for _ in range(25)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(successes) == 10
        assert len(failures) == 15
        assert dragon.fire_power == 0
        assert target.health == 0

    def test_concurrent_damage_is_not_lost(self, make_target):
        target = make_target(100)
        start = threading.Barrier(10)

        def hit():
            start.wait()
            for _ in range(5):
                target.take_damage(1)

        threads = [threading.Thread(target=hit) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert target.health == 50
