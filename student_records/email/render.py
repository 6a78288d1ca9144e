from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_loader = FileSystemLoader(str(Path(__file__).parent / "templates"))
env = Environment(
    loader=_loader,
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
)
render = env.get_template  # render("verify_account.html").render(ctx)
