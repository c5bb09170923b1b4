#!/usr/bin/env python3

from datetime import date

from bestiary.core.errors import (
    InvalidDamageError,
    InvalidHealError,
    LowFirePowerError,
    LowManaError,
    LowRageError,
)
from bestiary.core.events import EventManager
from bestiary.game.entities import Creature, Dragon, Elf, Orc
from bestiary.game.log_manager import LogManager

DRAGON_HEALTH = 90
DRAGON_FIRE_POWER = 15

ELF_HEALTH = 70
ELF_MANA = 8

ORC_HEALTH = 85
ORC_RAGE = 4


def print_summaries(creatures: list[Creature]) -> None:
    for creature in creatures:
        print(creature.summary())


def show_runtime_kinds(creatures: list[Creature]) -> None:
    for creature in creatures:
        print(f"{creature.name}: type={type(creature).__name__}, kind={creature.kind.name}")


def make_creatures_fight(dragon: Dragon, elf: Elf, orc: Orc) -> None:
    try:
        dragon.breathe_fire(orc)
        print("Dragon breathed fire on Orc.")
    except LowFirePowerError as e:
        print(f"Dragon could not breathe fire: {e}")
    except InvalidDamageError as e:
        print(f"Damage problem during fire attack: {e}")

    try:
        elf.cast_spell(dragon)
        print("Elf cast a spell on Dragon.")
    except LowManaError as e:
        print(f"Elf could not cast spell: {e}")
    except InvalidDamageError as e:
        print(f"Damage problem during spell: {e}")

    try:
        orc.berserk(elf)
        print("Orc went berserk on Elf.")
    except LowRageError as e:
        print(f"Orc could not berserk: {e}")
    except InvalidDamageError as e:
        print(f"Damage problem during berserk: {e}")

    try:
        elf.heal(-1)
    except InvalidHealError as e:
        print(f"Healing error caught safely: {e}")


def main():
    event_manager = EventManager()
    log_manager = LogManager(event_manager)

    today = date.today()
    dragon = Dragon("Smolder", today, DRAGON_HEALTH, DRAGON_FIRE_POWER, event_manager)
    elf = Elf("Elowen", today, ELF_HEALTH, ELF_MANA, event_manager)
    orc = Orc("Gruk", today, ORC_HEALTH, ORC_RAGE, event_manager)
    creatures: list[Creature] = [dragon, elf, orc]

    print("=== Creature Summaries ===")
    print_summaries(creatures)

    print("\n=== Runtime Kinds ===")
    show_runtime_kinds(creatures)

    print("\n=== Combat ===")
    make_creatures_fight(dragon, elf, orc)

    print("\n=== Final Status ===")
    print_summaries(creatures)

    event_manager.process_events()
    print("\n=== Combat Log ===")
    for line in log_manager.get_formatted_messages():
        print(line)


if __name__ == "__main__":
    main()
