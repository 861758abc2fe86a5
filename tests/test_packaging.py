import ast
import configparser
import pathlib

ROOT = pathlib.Path(__file__).resolve().parent.parent


def _nox_sessions():
    tree = ast.parse(ROOT.joinpath("noxfile.py").read_text())
    sessions = set()
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Call):
                decorator = decorator.func
            if isinstance(decorator, ast.Attribute) and decorator.attr == "session":
                sessions.add(node.name)
    return sessions


def test_every_extra_has_a_session():
    """Each extra is installed by the nox session of the same purpose."""
    config = configparser.ConfigParser()
    config.read(ROOT.joinpath("setup.cfg"))
    extras = set(config["options.extras_require"])
    assert extras == {"lint", "test"}
    assert _nox_sessions() == {"lint", "tests"}
