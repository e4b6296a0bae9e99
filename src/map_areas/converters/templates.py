"""Java-like declaration templates shared by every dialect."""

from enum import Enum

from map_areas.converters.errors import UnsupportedFormatError


class OutputStyle(str, Enum):
    """How a list of shapes is written out."""

    SINGLE = "single"
    ARRAY = "array"
    LIST = "list"
    ARRAYS_AS_LIST = "arrays_as_list"
    RAW = "raw"

    @classmethod
    def parse(cls, value: "OutputStyle | str") -> "OutputStyle":
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedFormatError(f"Unknown output style: {value}") from e


def declare_single(type_name: str, var_name: str, exprs: list[str]) -> str:
    """``T name = expr;``; several shapes get numbered variable names."""
    if len(exprs) == 1:
        return f"{type_name} {var_name} = {exprs[0]};"
    return "\n".join(
        f"{type_name} {var_name}{i} = {expr};" for i, expr in enumerate(exprs, start=1)
    )


def declare_array(type_name: str, var_name: str, exprs: list[str]) -> str:
    body = ",\n".join(f"    {expr}" for expr in exprs)
    return f"{type_name}[] {var_name} = {{\n{body}\n}};"


def declare_list(type_name: str, var_name: str, exprs: list[str]) -> str:
    adds = "\n".join(f"{var_name}.add({expr});" for expr in exprs)
    return f"List<{type_name}> {var_name} = new ArrayList<>();\n{adds}"


def declare_arrays_as_list(type_name: str, var_name: str, exprs: list[str]) -> str:
    inner = ",\n".join(f"        {expr}" for expr in exprs)
    return (
        f"List<{type_name}> {var_name} = Arrays.asList(\n"
        f"    new {type_name}[]{{\n{inner}\n    }}\n);"
    )


_DECLARATIONS = {
    OutputStyle.SINGLE: declare_single,
    OutputStyle.ARRAY: declare_array,
    OutputStyle.LIST: declare_list,
    OutputStyle.ARRAYS_AS_LIST: declare_arrays_as_list,
}


def declare(style: OutputStyle, type_name: str, var_name: str, exprs: list[str]) -> str:
    """Render constructor expressions in one of the four Java styles.

    A single expression always uses the plain declaration; no expressions
    produce an empty string.
    """
    if not exprs:
        return ""
    if len(exprs) == 1:
        return declare_single(type_name, var_name, exprs)
    try:
        return _DECLARATIONS[style](type_name, var_name, exprs)
    except KeyError as e:
        raise UnsupportedFormatError(f"No declaration template for style: {style.value}") from e
