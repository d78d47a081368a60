class Widget:
    version = "v2"


class Gadget:
    version = "v2"
