ERRORS = {
  "E_INPUT_OPEN": "Could not open input file",
  "E_OUTPUT_OPEN": "Could not open output file",
  "E_CONFIG_INVALID": "Invalid configuration value",
  "E_PAYLOAD_SIZE": "Payload too large for a 32-bit length prefix in",
}
