"""Post-build fixups for generated native-binding loaders.

After the binding generator emits its JavaScript loader, the entry point
(``index.js``) is patched in place:

    const { join } = require('path')
    const { inspect } = require('util')                                   <- inserted
    const customInspectSymbol = Symbol.for('nodejs.util.inspect.custom')  <- inserted
    ...

    globalThis.require = require                                          <- appended

The declaration file (``index.d.ts``) is left alone. Every other path is
ignored.
"""

__version__ = "0.1.0"

# Suffixes used to classify the target path
ENTRY_POINT_SUFFIX = "index.js"
DECLARATION_SUFFIX = "index.d.ts"

# Text emitted by the generator that the inserted bindings follow
ANCHOR = "const { join } = require('path')"

INSERTED_BLOCK = (
    ANCHOR
    + "\nconst { inspect } = require('util')"
    + "\nconst customInspectSymbol = Symbol.for('nodejs.util.inspect.custom')"
)

APPENDED_SNIPPET = "\nglobalThis.require = require\n"
