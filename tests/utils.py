import importlib.util
import sys
from pathlib import Path

import jsonschema


def setup():
    moduleRoot = Path(__file__).parent.parent
    moduleSource = moduleRoot.joinpath("json_schema_builder", "__init__.py")

    if str(moduleRoot) not in sys.path:
        sys.path.insert(0, str(moduleRoot))

    moduleName = Path(moduleSource).parent.name
    if moduleName in sys.modules:
        return sys.modules[moduleName]

    spec = importlib.util.spec_from_file_location(moduleName, moduleSource)
    module = importlib.util.module_from_spec(spec)

    sys.modules[moduleName] = module

    spec.loader.exec_module(module)

    return module


def validation_errors(schema, data):
    """Errors reported by the Draft-04 validator, ordered by path."""
    validator = jsonschema.Draft4Validator(schema)
    return sorted(validator.iter_errors(data), key=lambda e: [str(part) for part in e.absolute_path])


def assert_valid(schema, data):
    errors = validation_errors(schema, data)
    assert not errors, [error.message for error in errors]


def assert_invalid(schema, data):
    errors = validation_errors(schema, data)
    assert errors, f"{data} unexpectedly matched {schema}"
    return errors
