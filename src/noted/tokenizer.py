"""
Tokenizer for the interactive prompt.

Splits one input line into arguments on spaces, keeping quoted runs
together. Single and double quotes are interchangeable and need not pair
up. Unbalanced input is never an error.
"""

QUOTES = ("'", '"')


def tokenize(line: str) -> list[str]:
    """
    Split a line into argument tokens.

    Examples:
        tokenize("add milk 'buy two'")  -> ["add", "milk", "buy two"]
        tokenize("''")                  -> []
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_quotes = False

    for char in line:
        if char in QUOTES:
            if in_quotes and buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
        else:
            buffer.append(char)

    if buffer:
        tokens.append("".join(buffer))

    return tokens
