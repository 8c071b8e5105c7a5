def process_implementation(code: str) -> str:
    """Prepare the text of an <implementation> element for code generation.

    Line breaks become UNIX-style, leading blank lines are dropped, and the
    indentation of the first line is removed from every line. Lines indented
    differently from the first line keep the difference.
    """
    code = code.replace("\r\n", "\n").replace("\r", "\n")

    while code.startswith("\n"):
        code = code[1:]

    indent = len(code) - len(code.lstrip(" "))
    return code[indent:].replace("\n" + " " * indent, "\n")
