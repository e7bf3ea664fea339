import pytest

from dungeonmark.entities import (
    Armor,
    Exp,
    Gold,
    Heal,
    Item,
    ItemCatalog,
    Monster,
    Player,
    Position,
    Weapon,
)


def test_item_factories_set_payloads():
    assert Item.weapon("Sword", "A sharp sword", 10, 5).payload == Weapon(5)
    assert Item.armor("Shield", "A sturdy shield", 10, 5).payload == Armor(5)
    assert Item.gold(10).payload == Gold(10)
    assert Item.exp("Exp", "Experience", 100).payload == Exp(100)


def test_item_equality_is_structural():
    assert Item.weapon("Sword", "", 1, 2) == Item.weapon("Sword", "", 1, 2)
    assert Item.weapon("Sword", "", 1, 2) != Item.weapon("Sword", "", 1, 3)
    assert Item.weapon("Sword", "", 1, 2) != Item.armor("Sword", "", 1, 2)


def test_use_only_effect_items():
    assert Item.effect("Potion", "", 10, Heal(5)).use() == Heal(5)
    assert Item.weapon("Sword", "", 10, 5).use() is None


def test_add_value_and_copy_are_independent():
    gold = Item.gold(10)
    copy = gold.copy()

    gold.add_value(5)

    assert gold.value == 15
    assert copy.value == 10
    # the payload records the original pile size
    assert gold.payload == Gold(10)


def test_catalog_lookup():
    catalog = ItemCatalog.of([Item.gold(10), Item.weapon("Sword", "", 0, 3)])

    assert len(catalog) == 2
    assert "Sword" in catalog
    assert "Axe" not in catalog
    assert catalog.find("Axe") is None
    assert catalog.find("Sword") == Item.weapon("Sword", "", 0, 3)


def test_catalog_resolve_returns_copy():
    catalog = ItemCatalog.of([Item.gold(10)])

    resolved = catalog.resolve("Gold")

    assert resolved == Item.gold(10)
    assert resolved is not catalog.find("Gold")


def test_catalog_with_item_does_not_mutate():
    catalog = ItemCatalog()
    extended = catalog.with_item(Item.gold(1))

    assert len(catalog) == 0
    assert [item.name for item in extended] == ["Gold"]


def test_monster_damage():
    monster = Monster(name="Slime", life=10)

    monster.take_damage(4)
    assert monster.life == 6
    assert not monster.is_dead

    monster.take_damage(10)
    assert monster.life == -4
    assert monster.is_dead


def test_monster_without_drop_drops_nothing():
    assert Monster().drop_items() == []


def test_player_gold_stacks():
    player = Player(name="Ayla")

    player.add_item(Item.gold(10))
    player.add_item(Item.gold(20))

    gold = player.gold()
    assert gold is not None
    assert gold.value == 30
    assert len(player.inventory) == 1


def test_player_experience_levels_up():
    player = Player(name="Ayla", life=50, max_life=100, level=1, next_level=100)

    player.add_item(Item.exp("Exp", "Experience", 100))

    assert player.experience == 100
    assert player.level == 2
    assert player.next_level == 150
    assert player.max_life == 110
    assert player.life == 110
    assert player.inventory == []


def test_player_other_items_append():
    player = Player()
    sword = Item.weapon("Sword", "", 0, 3)

    player.add_item(sword)
    player.add_item(sword.copy())

    assert player.inventory == [sword, sword]


def test_player_equipment_checks_payload():
    player = Player()

    player.equip_weapon(Item.weapon("Sword", "", 0, 3))
    player.equip_armor(Item.armor("Mail", "", 0, 2))

    with pytest.raises(ValueError):
        player.equip_weapon(Item.armor("Mail", "", 0, 2))
    with pytest.raises(ValueError):
        player.equip_armor(Item.gold(3))


def test_player_move_to():
    player = Player()

    player.move_to(Position(0, 0).moved(1, -1))

    assert player.position == Position(1, -1)
