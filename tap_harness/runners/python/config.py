"""Configuration for the Python file runner."""

from pydantic import BaseModel


class PythonFileRunnerConfig(BaseModel):
    """Configuration for the Python file runner."""

    # Module global holding the unit's result object, e.g. its Session
    result_name: str = "result"
    # Put each unit's directory first on sys.path while it runs
    add_unit_dir_to_path: bool = True
