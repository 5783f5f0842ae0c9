"""Todo list -- file templates, actions and list rendering.

Shows backend actions with URL arguments and options, pair objects
built per row, custom events, infinite scroll with a visibility
threshold, and signals seeded from a Python mapping.

Run:
    python app.py
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from dsattr import install

templates_dir = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=True)
install(env)

todos = [
    {"id": 1, "title": "Write docs", "done": True},
    {"id": 2, "title": "Ship <release>", "done": False},
]

output = env.get_template("todos.html").render(todos=todos, filter="all", page=1)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
