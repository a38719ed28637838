"""Interactive operator tool for sealing and opening relay envelopes."""

import json
import logging

from relaycrypt.common.config import ConfigError, get_log_level, get_shared_key
from relaycrypt.common.envelope import seal, unseal
from relaycrypt.common.identifiers import generate_id, is_valid_id

ACTIONS = ("seal", "open", "id", "check-id")


def run_action(action: str, text: str, key_hex: str) -> str:
    """
    Perform one action and return the line to show the operator.

    seal:     text is a JSON document, result is the envelope string
    open:     text is an envelope string, result is the decrypted JSON
    id:       text is ignored, result is a fresh identifier
    check-id: result is "valid" or "invalid"
    """
    if action == "seal":
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            return f"Error: input is not valid JSON ({e.msg})"
        result = seal(value, key_hex)
        if not result.ok:
            return f"Error: could not seal payload ({result.kind})"
        return result.value

    if action == "open":
        result = unseal(text.strip(), key_hex)
        if not result.ok:
            return f"Error: could not open envelope ({result.kind})"
        return json.dumps(result.value, ensure_ascii=False)

    if action == "id":
        return generate_id()

    if action == "check-id":
        return "valid" if is_valid_id(text.strip()) else "invalid"

    return f"Error: Action must be one of {', '.join(ACTIONS)}"


def main():
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        key_hex = get_shared_key()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return

    mode = input(f"Action ({'/'.join(ACTIONS)}): ").strip().lower()
    if mode not in ACTIONS:
        print(f"Error: Action must be one of {', '.join(ACTIONS)}")
        return

    text = ""
    if mode == "seal":
        text = input("JSON payload: ")
    elif mode == "open":
        text = input("Envelope: ")
    elif mode == "check-id":
        text = input("Identifier: ")

    print(run_action(mode, text, key_hex))


if __name__ == "__main__":
    main()
