class Widget:
    version = "v1"
