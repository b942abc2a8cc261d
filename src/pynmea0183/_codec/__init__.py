"""Low-level sentence framing: checksum, tokenizer and talker split."""
