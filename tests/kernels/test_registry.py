import pytest

from chromashade import (
    ConfigurationError,
    KernelNotFoundError,
    KernelRegistry,
    KernelSignature,
    ParamType,
    default_registry,
    get_kernel,
    list_kernels,
)
from chromashade.colors import palette

BUILTIN = [
    "color_blend",
    "fill_blue_color",
    "fill_color",
    "fill_green_color",
    "fill_orange_color",
    "fill_red_color",
    "germany_flag",
    "italy_flag",
    "japan_flag",
    "stripes",
]


def _red(position, current_color):
    return palette.RED


def test_builtin_catalog():
    assert list_kernels() == BUILTIN
    assert len(default_registry) == len(BUILTIN)


def test_default_registry_is_frozen():
    assert default_registry.frozen
    with pytest.raises(RuntimeError):
        default_registry.register("late", KernelSignature(), _red)


@pytest.mark.parametrize("name", ["fillRedColor", "fill-red-color", "FILL_RED_COLOR", "fill_red_color"])
def test_name_normalization(name):
    assert get_kernel(name).name == "fill_red_color"
    assert name in default_registry


def test_lookup_missing_raises_not_found():
    with pytest.raises(KernelNotFoundError) as info:
        get_kernel("rainbow_swirl")
    assert "rainbow_swirl" in str(info.value)
    assert isinstance(info.value, ConfigurationError)
    assert isinstance(info.value, KeyError)


def test_register_and_lookup():
    reg = KernelRegistry()
    entry = reg.register("solid", KernelSignature(), _red)
    assert reg.lookup("Solid") is entry
    assert entry((0, 0), None) == palette.RED
    assert reg.names() == ["solid"]


def test_duplicate_name_with_other_function_rejected():
    reg = KernelRegistry()
    reg.register("solid", KernelSignature(), _red)
    reg.register("solid", KernelSignature(), _red)
    with pytest.raises(ValueError):
        reg.register("solid", KernelSignature(), lambda p, c: palette.BLUE)


def test_decorator_uses_function_name():
    reg = KernelRegistry()

    @reg.kernel(None, ParamType.FLOAT, current_color=False)
    def brightness(position, level):
        return palette.WHITE

    entry = reg.lookup("brightness")
    assert entry.signature.params == (ParamType.FLOAT,)
    assert not entry.signature.takes_current_color
    assert brightness((0, 0), 1.0) == palette.WHITE


def test_invalid_names():
    reg = KernelRegistry()
    with pytest.raises(ValueError):
        reg.lookup("")
    with pytest.raises(TypeError):
        reg.lookup(3)
    assert 3 not in reg


def test_registry_view_is_read_only():
    view = default_registry.registry
    with pytest.raises(TypeError):
        view["x"] = None


def test_declared_signatures():
    assert get_kernel("fill_color").signature.params == (ParamType.COLOR,)
    assert get_kernel("color_blend").signature.params == (ParamType.COLOR, ParamType.COLOR)
    assert get_kernel("stripes").signature == KernelSignature(
        (ParamType.FLOAT, ParamType.COLOR_ARRAY), takes_current_color=False
    )
    for name in ("italy_flag", "germany_flag", "japan_flag"):
        assert get_kernel(name).signature.params == (ParamType.BOUNDING_RECT,)
