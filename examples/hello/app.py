"""Hello dsattr -- build Datastar attributes as plain dicts.

No template engine involved: each helper returns a dict and
render_attrs() turns it into HTML attribute text.

Run:
    python app.py
"""

from dsattr import (
    MOD_DEBOUNCE,
    MOD_IF_MISSING,
    bind,
    int_,
    merge,
    ms,
    on_click,
    post,
    render_attrs,
    show,
    signals,
    string,
    text,
)

root_attrs = signals(string("name", "World"), int_("clicks", 0), MOD_IF_MISSING)
input_attrs = bind("name")
greeting_attrs = merge(show("$name != ''"), text("'Hello, ' + $name + '!'"))
button_attrs = on_click(post("/api/hello"), MOD_DEBOUNCE, ms(250))

output = (
    f"<div{render_attrs(root_attrs)}>\n"
    f"  <input{render_attrs(input_attrs)}>\n"
    f"  <p{render_attrs(greeting_attrs)}></p>\n"
    f"  <button{render_attrs(button_attrs)}>Say hello</button>\n"
    "</div>"
)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
