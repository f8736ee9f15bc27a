"""ORM docblock annotator.

Generates docblock annotations for database fields and ORM relations so
editors with autocompletion recognize properties and relation methods that
are only declared in config.

Generated blocks are demarcated and sit directly above the class:

    /**
     * ============================================================== (generated)
     * @property string Title
     * @property int AuthorID
     * @method Member Author
     * ============================================================== (/generated)
     */
    class Article extends DataObject

Anything outside these markers is preserved untouched.
"""

# Marker constants used by the renderer, the block transform and sync
STARTTAG = "============================================================== (generated)"
ENDTAG = "============================================================== (/generated)"
