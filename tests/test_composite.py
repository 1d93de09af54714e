import pytest

from structural_patterns.composite import (
    CPU,
    GPU,
    RAM,
    SSD,
    Computer,
    Keyboard,
    Monitor,
    Motherboard,
    Mouse,
    Part,
    Peripherals,
    Speakers,
    Tower,
    create_computer,
    main,
)


@pytest.fixture
def computer():
    return create_computer(Computer())


def test_create_computer_top_level(computer):
    kinds = [type(child) for child in computer.children]
    assert kinds == [Peripherals, Tower]
    assert all(child.parent is computer for child in computer.children)


def test_create_computer_parts(computer):
    peripherals, tower = computer.children
    assert [type(p) for p in peripherals.children] == [Mouse, Keyboard, Monitor, Speakers]
    (motherboard,) = tower.children
    assert isinstance(motherboard, Motherboard)
    assert [type(p) for p in motherboard.children] == [SSD, RAM, CPU, GPU]
    assert all(p.parent is motherboard for p in motherboard.children)


def test_describe_concatenates_children_in_order(computer):
    lines = computer.describe()
    assert lines[:2] == ["Mouse Stats", "DPI: 1000"]
    assert "Keyboard Stats" in lines
    assert lines.index("Mouse Stats") < lines.index("SSD Stats") < lines.index("GPU Stats")
    peripherals, tower = computer.children
    assert lines == peripherals.describe() + tower.describe()


def test_is_composite():
    assert Computer().is_composite() is True
    assert Mouse().is_composite() is False
    assert Part().is_composite() is False


def test_add_sets_parent_and_remove_clears_it():
    tower = Tower()
    cpu = CPU(4)
    tower.add(cpu)
    assert tower.children == (cpu,)
    assert cpu.parent is tower
    tower.remove(cpu)
    assert tower.children == ()
    assert cpu.parent is None


def test_remove_drops_every_occurrence():
    board = Motherboard()
    ram = RAM(16)
    other = RAM(16)
    board.add(ram)
    board.add(other)
    board.add(ram)
    board.remove(ram)
    assert board.children == (other,)


def test_leaf_add_is_ignored():
    mouse = Mouse()
    gpu = GPU()
    mouse.add(gpu)
    assert gpu.parent is None
    assert mouse.describe() == ["Mouse Stats", "DPI: 1000"]


def test_children_is_a_copy():
    tower = Tower()
    tower.add(SSD())
    snapshot = tower.children
    tower.add(RAM())
    assert len(snapshot) == 1
    assert len(tower.children) == 2


def test_part_defaults_and_describe():
    part = Part()
    assert part.describe() == ["Brand Name: N/A", "Model Name: N/A"]
    named = Part(brand_name="Asus", model_name="X")
    assert named.describe() == ["Brand Name: Asus", "Model Name: X"]


def test_leaf_descriptions_format_booleans_and_numbers():
    assert Keyboard(False).describe() == ["Keyboard Stats", "HasClickyKeys: 0"]
    assert Speakers(True, 5).describe()[1] == "Speakers Powered: 1"
    assert Monitor(9, 16).describe() == ["Monitor Length: 9", "Monitor Width: 16"]


def test_main_prints_tree(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Hello World"
    assert out[1:] == create_computer(Computer()).describe()
    assert out[-1] == "GPU Memory: 16"