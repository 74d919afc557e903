import pytest

from spacewar.game import Game
from spacewar.gameobject import BaseGameObject, PhysicsGameObject
from spacewar.vecmath import Vec2


class NoJoysticks:
    def is_connected(self, index):
        return False

    def axis_position(self, index):
        return 0.0

    def button_count(self, index):
        return 0

    def is_button_pressed(self, index, button):
        return False


class Counter(BaseGameObject):
    def __init__(self, game, texture, origin, start_position):
        super().__init__(game, texture, origin, start_position)
        self.updates = []

    def init(self):
        self.ready = True

    def update(self, delta_time):
        self.updates.append(delta_time)


class Spawner(Counter):
    def update(self, delta_time):
        super().update(delta_time)
        self.child = self.game.create_object(Counter, None, Vec2(), Vec2())


class Mover(PhysicsGameObject):
    def __init__(self, game, texture, origin, start_position):
        super().__init__(game, texture, origin, start_position)
        self.hits = []

    def init(self):
        self.attach_collision(Vec2(20, 20))

    def update(self, delta_time):
        self.sprite.position = self.physics.position

    def on_collision(self, other):
        self.hits.append(other)


@pytest.fixture
def game():
    return Game((800, 600), joysticks=NoJoysticks())


def test_create_object_adds_to_world(game):
    obj = game.create_object(Counter, "tex", Vec2(1, 1), Vec2(5, 5))
    assert game.objects == [obj]
    assert obj.game is game
    assert obj.sprite.texture == "tex"


def test_marked_objects_are_destroyed_on_next_update(game):
    obj = game.create_object(Counter, None, Vec2(), Vec2())
    game.mark_for_destruction(obj)
    assert game.objects == [obj]
    game.update(0.1)
    assert game.objects == []
    assert obj.disposed
    assert obj.updates == []


def test_marking_unknown_object_is_ignored(game):
    stray = Counter(game, None, Vec2(), Vec2())
    game.mark_for_destruction(stray)
    game.destroy_marked()
    assert not stray.disposed


def test_destroy_object_and_destroy_all(game):
    first = game.create_object(Counter, None, Vec2(), Vec2())
    second = game.create_object(Counter, None, Vec2(), Vec2())
    game.destroy_object(first)
    assert game.objects == [second]
    assert first.disposed
    game.destroy_all()
    assert game.objects == []
    assert second.disposed


def test_missing_texture_raises(game):
    with pytest.raises(KeyError):
        game.texture("nothing")


def test_load_textures_recurses_and_filters(game, tmp_path):
    (tmp_path / "a.png").write_bytes(b"")
    (tmp_path / "notes.txt").write_bytes(b"")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.png").write_bytes(b"")
    game.load_textures(tmp_path, loader=lambda path: f"loaded:{path.name}")
    assert game.texture("a") == "loaded:a.png"
    assert game.texture("b") == "loaded:b.png"
    assert "notes" not in game.textures


def test_load_textures_reports_failures(game, tmp_path, capsys):
    (tmp_path / "broken.png").write_bytes(b"")

    def failing(path):
        raise OSError("bad file")

    game.load_textures(tmp_path, loader=failing)
    assert "Failed to load asset broken" in capsys.readouterr().out
    assert game.texture("broken") is None


def test_objects_spawned_during_update_wait_a_frame(game):
    spawner = game.create_object(Spawner, None, Vec2(), Vec2())
    game.update(0.5)
    assert spawner.updates == [0.5]
    assert spawner.child.updates == []
    assert len(game.objects) == 2


def test_physics_objects_wrap_inside_window(game):
    mover = game.create_object(Mover, None, Vec2(), Vec2(900, 100))
    game.update(0.0)
    assert mover.physics.position == Vec2(0, 100)


def test_overlapping_objects_collide(game):
    a = game.create_object(Mover, None, Vec2(), Vec2(100, 100))
    b = game.create_object(Mover, None, Vec2(), Vec2(105, 100))
    a.init()
    b.init()
    game.update(0.01)
    assert a.hits == [b]
    assert b.hits == [a]


def test_shutdown_clears_everything(game, tmp_path):
    (tmp_path / "a.png").write_bytes(b"")
    game.load_textures(tmp_path, loader=lambda path: path.name)
    obj = game.create_object(Mover, None, Vec2(), Vec2())
    game.shutdown()
    assert game.objects == []
    assert obj.disposed
    assert len(game.textures) == 0
    assert len(game.physics) == 0