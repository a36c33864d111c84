EMPTY_PAYLOAD = "{}"
