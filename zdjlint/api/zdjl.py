"""Built-in catalogue for the `zdjl` automation API."""

from __future__ import annotations

from functools import cache
from typing import Final

from zdjlint.api.catalogue import APICatalogue, APIEntry, APIParameter, build_catalogue

NAMESPACE: Final[str] = "zdjl"


def _p(name: str, type: str = "any", description: str = "", *, optional: bool = False) -> APIParameter:
    return APIParameter(name=name, type=type, optional=optional, description=description)


def _rest(name: str, type: str = "any", description: str = "") -> APIParameter:
    return APIParameter(name=name, type=type, optional=True, description=description, variadic=True)


def _fn(name: str, *parameters: APIParameter, description: str = "", example: str | None = None) -> APIEntry:
    return APIEntry(name=name, kind="function", parameters=parameters, description=description, example=example)


def _with_async(entry: APIEntry) -> tuple[APIEntry, APIEntry]:
    """Pair a blocking call with its promise-returning `...Async` twin."""
    return (
        entry,
        APIEntry(
            name=f"{entry.name}Async",
            kind=entry.kind,
            parameters=entry.parameters,
            description=f"{entry.description} Returns a Promise.".strip(),
        ),
    )


_COORD = "number | string"
_DIALOG_OPTIONS = _p("options", "{ duration?: number; title?: string }", "Dialog options", optional=True)
_SCOPE = _p("scope", "string", "Variable scope, `global` by default", optional=True)
_FILE_PATH = _p("filePath", "string", "Absolute path on the device")
_FILE_CONTENT = _p("fileContent", "string | ArrayBuffer | Uint8Array", "Data to write")

ZDJL_ENTRIES: Final[tuple[APIEntry, ...]] = (
    # Dialogs
    _fn(
        "toast",
        _p("message", "string", "Text to show"),
        _p("duration", "number", "Display time in milliseconds", optional=True),
        description="Show a short toast message.",
        example='zdjl.toast("done", 2000);',
    ),
    *_with_async(_fn("alert", _p("message", "string", "Text to show"), _DIALOG_OPTIONS, description="Show an alert dialog.")),
    *_with_async(
        _fn("confirm", _p("message", "string", "Question to ask"), _DIALOG_OPTIONS, description="Ask for confirmation.")
    ),
    *_with_async(
        _fn(
            "prompt",
            _p("message", "string", "Prompt text"),
            _p("defaultValue", "string", "Pre-filled value", optional=True),
            _p("options", "{ duration?: number }", "Dialog options", optional=True),
            description="Ask the user for text input.",
        )
    ),
    *_with_async(
        _fn(
            "select",
            _p("config", "{ title?, items, selectItems?, multi?, duration? }", "Selection dialog configuration"),
            description="Let the user pick one or more items.",
        )
    ),
    # Device and app information
    _fn("getAppVersion", description="Version name of the automation app."),
    _fn("getUser", description="Signed-in user information."),
    _fn("getDeviceInfo", description="Screen and device information."),
    *_with_async(
        _fn("getLocation", _p("param", "{ timeout?: number }", "Lookup options"), description="Current GPS location.")
    ),
    _fn("setScreenBrightness", _p("value", "number", "Brightness level"), description="Set the screen brightness."),
    *_with_async(_fn("setWifiEnable", _p("enable", "boolean"), description="Toggle Wi-Fi.")),
    *_with_async(_fn("setBluetoothEnable", _p("enable", "boolean"), description="Toggle Bluetooth.")),
    *_with_async(_fn("setCameraFlashEnable", _p("enable", "boolean"), description="Toggle the camera flash.")),
    _fn("getInstalledAppInfo", description="List installed applications."),
    _fn("getMousePosition", description="Current mouse position on PC clients."),
    *_with_async(_fn("playMedia", _p("url", "string", "Media URL"), description="Play an audio or video file.")),
    *_with_async(
        _fn(
            "vibrator",
            _p("duration", "number", "Vibration time in milliseconds", optional=True),
            _p("amplitude", "number", "Vibration strength", optional=True),
            description="Vibrate the device.",
        )
    ),
    _fn("wakeupScreen", description="Turn the screen on."),
    # Files
    *_with_async(_fn("writeFile", _FILE_PATH, _FILE_CONTENT, description="Write a file, replacing its content.")),
    *_with_async(_fn("appendFile", _FILE_PATH, _FILE_CONTENT, description="Append to a file.")),
    *_with_async(
        _fn(
            "readFile",
            _FILE_PATH,
            _p("options", "{ encode?: string; returnBuffer?: boolean }", "Read options", optional=True),
            description="Read a file.",
        )
    ),
    # Screen colours
    *_with_async(
        _fn(
            "getScreenColor",
            _p("x", _COORD, "Horizontal position"),
            _p("y", _COORD, "Vertical position"),
            _p("ignoreCache", "boolean", "Capture a fresh screenshot", optional=True),
            description="Colour of one screen pixel.",
        )
    ),
    *_with_async(
        _fn(
            "getScreenAreaColors",
            _p("param", "{ x, y, width, height, ignoreCache?, sampleSize? }", "Area to sample"),
            description="Colours of a screen area.",
        )
    ),
    # Gestures
    *_with_async(
        _fn(
            "click",
            _p("x", _COORD, "Horizontal position in px, dp or %"),
            _p("y", _COORD, "Vertical position in px, dp or %"),
            _p("duration", "number", "Press time in milliseconds", optional=True),
            description="Tap a screen position.",
            example="zdjl.click(500, 800);",
        )
    ),
    *_with_async(
        _fn(
            "longClick",
            _p("x", _COORD, "Horizontal position"),
            _p("y", _COORD, "Vertical position"),
            description="Long-press a screen position.",
        )
    ),
    *_with_async(
        _fn(
            "press",
            _p("x", _COORD, "Horizontal position"),
            _p("y", _COORD, "Vertical position"),
            _p("duration", "number", "Press time in milliseconds", optional=True),
            description="Press and hold a screen position.",
        )
    ),
    *_with_async(
        _fn(
            "swipe",
            _p("x1", _COORD, "Start x"),
            _p("y1", _COORD, "Start y"),
            _p("x2", _COORD, "End x"),
            _p("y2", _COORD, "End y"),
            _p("duration", "number", "Swipe time in milliseconds", optional=True),
            description="Swipe between two positions.",
        )
    ),
    *_with_async(
        _fn(
            "gesture",
            _p("duration", "number", "Gesture time in milliseconds"),
            _rest("xyArray", "[x, y]", "Points along the path"),
            description="Perform a single-finger gesture.",
        )
    ),
    *_with_async(
        _fn("gestures", _rest("gestureConfigs", "[duration, ...points]", "One entry per finger"), description="Perform a multi-finger gesture.")
    ),
    # Clipboard
    _fn("getClipboard", description="Read the clipboard."),
    _fn("setClipboard", _p("text", "string", "Text to copy"), description="Write the clipboard."),
    # Stored variables
    _fn(
        "getVar",
        _p("varName", "string", "Variable name"),
        _SCOPE,
        description="Read a stored script variable.",
        example='zdjl.getVar("count");',
    ),
    _fn(
        "setVar",
        _p("varName", "string", "Variable name"),
        _p("varValue", "any", "Value to store"),
        _SCOPE,
        description="Store a script variable.",
        example='zdjl.setVar("count", 1);',
    ),
    _fn("deleteVar", _p("varName", "string", "Variable name"), _SCOPE, description="Delete a stored variable."),
    _fn(
        "deleteVarWithConfirm",
        _p("varName", "string", "Variable name"),
        _SCOPE,
        description="Delete a stored variable after confirmation.",
    ),
    _fn("getVars", _SCOPE, description="All stored variables of a scope."),
    _fn("printVars", description="Print every stored variable."),
    _fn("clearVars", _p("scopeId", "string", "Scope to clear", optional=True), description="Clear stored variables."),
    _fn("clearVarsWithConfirm", _p("scope", "string", "Scope to clear"), description="Clear after confirmation."),
    # Persistent storage
    _fn(
        "getStorage",
        _p("storageKey", "string", "Storage key"),
        _p("scope", "string", "Storage scope", optional=True),
        description="Read persistent storage.",
    ),
    _fn(
        "setStorage",
        _p("storageKey", "string", "Storage key"),
        _p("content", "any", "Value to store"),
        _p("scope", "string", "Storage scope", optional=True),
        description="Write persistent storage.",
    ),
    _fn(
        "removeStorage",
        _p("storageKey", "string", "Storage key"),
        _p("scope", "string", "Storage scope", optional=True),
        description="Remove a persistent storage key.",
    ),
    # Network, recognition and actions
    *_with_async(
        _fn(
            "requestUrl",
            _p("config", "{ url, method?, headers?, requestBody?, requestType?, responseType?, timeout? }"),
            description="Send an HTTP request.",
        )
    ),
    *_with_async(_fn("ocr", _p("param", "{ mode?, base64, resultType? }", "Image to read"), description="Read text from an image.")),
    *_with_async(_fn("runAction", _p("actionJSON", "object", "Action definition"), description="Run an action.")),
    *_with_async(_fn("check", _p("conditionJSON", "object", "Condition definition"), description="Evaluate a condition.")),
    *_with_async(
        _fn(
            "findNode",
            _p("posData", "findNode", "Node query"),
            _p("config", "{ findAll?, withChildren? }", "Search options"),
            description="Find accessibility nodes.",
        )
    ),
    *_with_async(
        _fn(
            "findLocation",
            _p("posData", "findImage | findText | findColor", "What to look for"),
            _p("findAll", "boolean", "Return every match", optional=True),
            description="Locate an image, text or colour on screen.",
        )
    ),
    *_with_async(
        _fn(
            "recognitionScreen",
            _p("config", "recognitionScreenConfig", "Area and recognition mode"),
            description="Recognise text or images in a screen area.",
        )
    ),
)

ZDJL_MISSPELLINGS: Final[dict[str, str]] = {
    "cick": "click",
    "clik": "click",
    "clck": "click",
    "swip": "swipe",
    "swpe": "swipe",
    "gestur": "gesture",
    "gestre": "gesture",
    "toas": "toast",
    "toost": "toast",
    "alrt": "alert",
    "confim": "confirm",
    "cnofirm": "confirm",
    "confrm": "confirm",
    "promt": "prompt",
    "promp": "prompt",
    "slect": "select",
    "selec": "select",
    "getvar": "getVar",
    "setvar": "setVar",
    "deletvar": "deleteVar",
    "delvar": "deleteVar",
    "clearvar": "clearVars",
    "getclipbord": "getClipboard",
    "setclipbord": "setClipboard",
    "writefile": "writeFile",
    "readfile": "readFile",
    "apendfile": "appendFile",
    "appendfile": "appendFile",
    "getscreencolor": "getScreenColor",
    "getscreenareacolor": "getScreenAreaColors",
    "findloction": "findLocation",
    "findlocaton": "findLocation",
    "findnod": "findNode",
    "recognitionscreen": "recognitionScreen",
    "reqesturl": "requestUrl",
    "requesurl": "requestUrl",
    "getdeviceinfo": "getDeviceInfo",
    "getuser": "getUser",
    "getappversion": "getAppVersion",
    "vibratr": "vibrator",
    "vibrat": "vibrator",
    "wakupScreen": "wakeupScreen",
    "wakeupscreen": "wakeupScreen",
    "longcick": "longClick",
    "longclik": "longClick",
    "longclck": "longClick",
}


@cache
def default_catalogue() -> APICatalogue:
    return build_catalogue(NAMESPACE, ZDJL_ENTRIES, ZDJL_MISSPELLINGS)
