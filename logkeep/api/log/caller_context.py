from types import FrameType


def caller_context(frame: FrameType | None) -> str:
    """Describe a frame as ``[Type.member() Line:N]``.

    Type is the class of ``self``/``cls`` when the frame belongs to a method,
    otherwise the last component of the module name.
    """
    if frame is None:
        return "[unknown() Line:0]"

    owner = frame.f_locals.get("self")
    cls = frame.f_locals.get("cls")
    if owner is not None:
        type_name = type(owner).__name__
    elif isinstance(cls, type):
        type_name = cls.__name__
    else:
        type_name = str(frame.f_globals.get("__name__", "module")).rsplit(".", 1)[-1]

    return f"[{type_name}.{frame.f_code.co_name}() Line:{frame.f_lineno}]"
