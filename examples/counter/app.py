"""Counter -- Datastar helpers inside Jinja2 templates.

install() registers every helper under the ``ds`` global and the
``ds_attrs`` filter that renders an attribute map as HTML.

Run:
    python app.py
"""

from jinja2 import DictLoader, Environment

from dsattr import install

templates = {
    "counter.html": (
        "<div{{ ds.signals(ds.int_('count', start), ds.bool_('busy', false)) | ds_attrs }}>\n"
        "  <button{{ ds.on_click('$count--') | ds_attrs }}>-</button>\n"
        "  <span{{ ds.text('$count') | ds_attrs }}></span>\n"
        "  <button{{ ds.on_click('$count++') | ds_attrs }}>+</button>\n"
        "  <button{{ ds.merge(ds.on_click(ds.put('/api/counter/%d', counter_id)),"
        " ds.indicator('busy'), ds.attr('disabled', '$busy')) | ds_attrs }}>Save</button>\n"
        "</div>"
    ),
}

env = Environment(loader=DictLoader(templates), autoescape=True)
ds = install(env)

output = env.get_template("counter.html").render(start=5, counter_id=7)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
