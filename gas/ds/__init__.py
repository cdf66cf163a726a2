"""Slot-indexed maps, heap-ordered maps and an id-based proxy registry."""