"""CHIP-8 instruction executors, grouped by opcode family."""
