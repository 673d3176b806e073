"""
Source highlighting demonstration for jsonspan.
"""

import jsonspan
from jsonspan import JsonSpanError


DOCUMENT = """{
    "service": "billing",
    "replicas": "three",
    "ports": [8080, 8443],
    "env": {"DEBUG": "yes", "REGION": "eu-west-1"}
}"""


def highlight(text, pointer, note):
    """Print the line holding ``pointer`` with the value underlined."""
    span = jsonspan.find_span(text, pointer)
    if span is None:
        print(f"{pointer}: not found")
        return

    line_start = text.rfind("\n", 0, span.start) + 1
    line_end = text.find("\n", span.end)
    if line_end == -1:
        line_end = len(text)
    line_no = text.count("\n", 0, span.start) + 1

    print(f"{pointer} (line {line_no}): {note}")
    print(f"  {text[line_start:line_end]}")
    print("  " + " " * (span.start - line_start) + "^" * max(1, span.length))


def main():
    print("jsonspan - Source Highlighting Demo")
    print("=" * 36)

    print("\n1. Highlight schema violations")
    highlight(DOCUMENT, "/replicas", "expected an integer")
    highlight(DOCUMENT, "/env/DEBUG", "expected a boolean")
    highlight(DOCUMENT, "/ports/1", "port requires TLS configuration")

    print("\n2. Partial extraction")
    print(f"  /env -> {jsonspan.extract(DOCUMENT, '/env')}")

    print("\n3. Missing paths")
    print(f"  locate('/timeout')    -> {jsonspan.locate(DOCUMENT, '/timeout')}")
    print(f"  find_span('/timeout') -> {jsonspan.find_span(DOCUMENT, '/timeout')}")

    print("\n4. Errors")
    for text, pointer in [("42", "/a"), ('{"a": "\\q"}', "/a"), ('{"a": 1}', "a")]:
        try:
            jsonspan.locate(text, pointer)
        except JsonSpanError as e:
            print(f"  {text!r} {pointer!r}: {type(e).__name__}: {e.message}")


if __name__ == "__main__":
    main()
