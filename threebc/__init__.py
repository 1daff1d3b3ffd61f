"""Instruction set, errors, memory, pause timer and instruction handlers for a 3BC virtual machine."""

__version__ = "0.1.4"