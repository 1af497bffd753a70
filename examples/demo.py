"""
jsoncomments demonstration script.
"""

import io
import json

import jsoncomments
from jsoncomments import StripComments, UnterminatedBlockComment


def main():
    print("jsoncomments - Comment Stripping Demo")
    print("=" * 40)

    examples = [
        ('{"a": 1, /* inline */ "b": 2}', "Block comment"),
        ('[1, 2] // trailing note', "Line comment"),
        ('{"debug": true} # shell style', "Shell comment"),
        ('{"url": "http://example.com/#top"}', "Comment markers inside strings"),
        ('{"path": "C:\\\\dir\\\\"} /* after an escaped backslash */', "Escapes"),
        ("1 /* a\nb */ 2", "Block comment spanning lines"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text!r}")
        print(f"Output: {jsoncomments.strip_comments(text)!r}")

    print("\n7. Parsing a commented document")
    document = """
    {
        "name": /* full */ "John Doe",
        "age": 43,
        "phones": [
            "+44 1234567", // work phone
            "+44 2345678"  // home phone
        ]
    }"""
    data = jsoncomments.loads(document)
    print(f"Please call {data['name']} at the number {data['phones'][0]}")

    print("\n8. Streaming into json.load")
    source = io.BytesIO(document.encode("utf-8"))
    print(f"Parsed: {json.load(StripComments(source))}")

    print("\n9. Truncated input")
    try:
        jsoncomments.strip_comments('{"a": 1} /* never closed')
    except UnterminatedBlockComment as e:
        print(f"Error:  {e}")


if __name__ == "__main__":
    main()
