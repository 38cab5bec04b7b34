"""CSS selectors and markers for the platform's page markup.

Kept in one place so extraction can follow markup changes without touching
the extraction logic.
"""

# Profile page
SHOW_MORE_TOPICS = ".list .check-more"
SECTION_HEADING = ".title"
TOPIC_SECTION_LABEL = "他创建的专题"
TOPIC_ITEM = "li"
TOPIC_NAME = ".name"

# Topic listings and author homepages share the note-list markup
NOTE_ITEM = ".note-list > li"
NOTE_TITLE = ".title"
NOTE_AUTHOR = ".nickname"
STAR_ICON = ".ic-list-like"
COMMENT_ICON = ".ic-list-comments"
READ_ICON = ".ic-list-read"
PUBLISH_TIME = ".time"
PUBLISH_TIME_ATTR = "data-shared-at"
