# InputGuard.py
"""""
Input affordances for the display the user is typing into.

These rules only keep obviously invalid sequences off the display
(double dots, stacked operators, ')' right after an operator). They are
a convenience for the collaborator, not a parser: whatever ends up on the
display is still validated by MathEngine.evaluate().

The display string "0" stands for an empty display.
"""""

Operations = ["+", "-", "*", "/"]
EMPTY_DISPLAY = "0"

# Key name -> action, mirrors the keypad/keyboard mapping of the calculator
KEY_BINDINGS = {
    "Enter": "evaluate",
    "=": "evaluate",
    "Backspace": "backspace",
    "Escape": "clear",
    "c": "clear",
    "C": "clear",
}
for _key in "0123456789+-*/().":
    KEY_BINDINGS[_key] = "append"


def isOp(char):
    return char in Operations


def set_display(value):
    return EMPTY_DISPLAY if value == "" else value


def current_segment(cur):
    """Return the number segment after the last operator or '('."""
    idx = max(cur.rfind(op) for op in Operations + ["("])
    return cur[idx + 1:]


def append(display, value):
    """Return the display after typing `value`, applying the input guards."""
    cur = "" if display == EMPTY_DISPLAY else display
    lastChar = cur[-1:]

    # Only one dot per number segment; a leading dot becomes "0."
    if value == ".":
        segment = current_segment(cur)
        if "." in segment:
            return display
        if segment == "":
            value = "0."

    if isOp(value):
        # unary minus is the only operator allowed at the start or after '('
        if cur == "" and value == "-":
            return "-"
        if lastChar in ("", "("):
            if value != "-":
                return display
        if isOp(lastChar):
            beforeLast = cur[-2:-1]
            prevWasUnaryMinus = lastChar == "-" and (len(cur) == 1 or isOp(beforeLast) or beforeLast == "(")
            if not prevWasUnaryMinus:
                # replace the previous operator
                return set_display(cur[:-1] + value)

    if value == ")" and isOp(lastChar):
        return display

    return set_display(cur + value)


def backspace(display):
    if len(display) <= 1:
        return EMPTY_DISPLAY
    return display[:-1]


def clear(display=None):
    return EMPTY_DISPLAY


def press(display, key):
    """Apply one key press.

    Returns:
        (new_display, action) where action is the bound action name or None
        for keys without a binding. 'evaluate' leaves the display untouched;
        the caller runs the engine.
    """
    action = KEY_BINDINGS.get(key)
    if action == "append":
        return append(display, key), action
    if action == "backspace":
        return backspace(display), action
    if action == "clear":
        return clear(display), action
    return display, action


def type_keys(keys, display=EMPTY_DISPLAY):
    """Replay a string of single-character keys and return the resulting display."""
    for key in keys:
        display, action = press(display, key)
        if action == "evaluate":
            break
    return display
