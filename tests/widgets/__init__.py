"""Importable components used to exercise namespace resolution."""


class Widget:
    version = None


class Gadget:
    version = None
