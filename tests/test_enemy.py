from iguanadave.enemy import Enemy


def test_enemy_takes_damage():
    e = Enemy("Test Dummy", 50, 5)
    e.take_damage(20)
    assert e.health == 30
    e.take_damage(50)
    assert e.health == 0


def test_enemy_attributes():
    e = Enemy("Test Dummy", 50, 5)
    assert e.name == "Test Dummy"
    assert e.health == 50
    assert e.damage == 5


def test_enemy_health_never_negative():
    e = Enemy("Test Dummy", 50, 5)
    for _ in range(5):
        e.take_damage(30)
        assert e.health >= 0
    assert e.health == 0


def test_damage_does_not_change_attack():
    e = Enemy("Test Dummy", 50, 5)
    e.take_damage(20)
    assert e.damage == 5