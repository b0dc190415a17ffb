from typing_extensions import Any, Callable, Optional

def stage_banner(stage_name: Optional[str] = None):
    """ This decorator announces entering (`+stage(...)`) and leaving (`-stage(...)`) a pipeline stage.
    The first positional argument after `self` (if any) is shown inside the parentheses, e.g. the input path."""
    def decorator(func: Callable[[Any], Any]):
        name = stage_name if stage_name is not None else func.__name__

        def wrapper(*args, **kwargs):
            shown = args[1] if len(args) > 1 and isinstance(args[1], str) else ""
            print(f"INFO: +{name}({shown})", flush=True)
            output = func(*args, **kwargs)
            print(f"INFO: -{name}({shown})", flush=True)
            return output
        wrapper.__name__ = func.__name__
        wrapper.__doc__ = func.__doc__
        return wrapper
    return decorator
