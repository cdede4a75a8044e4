# larkit

Tools for building Lark/Feishu bots:

- a declarative, chainable builder for interactive message cards, including
  localized (i18n) cards;
- helpers for decrypting encrypted event callbacks and for signing
  notification-bot webhook requests.

Cards render to plain Python dictionaries and lists, ready to be serialized as
JSON and sent as the content of an `interactive` message.

## Requirements

Python 3.10 or later. The only runtime dependency is `cryptography`.

## Building a card

Every element is created with a small factory function and configured by
chaining methods; `render()` produces the JSON-ready structure.

```python
from larkit.card.card import card
from larkit.card.elements import field, hr, markdown, option, text
from larkit.card.interactive import action, button, overflow, select_menu
from larkit.card.layout import div, img, note

message_card = (
    card(
        div(
            field(text("Left")).short(),
            field(text("Right")).short(),
            field(text("Full row **Markdown**").lark_md()),
        ),
        div().text(text("Text content")).extra(img("img_placeholder_key")),
        hr(),
        action(
            button(text("**Primary**").lark_md()).primary(),
            button(text("Confirm")).confirm("Confirm", "Are you sure?"),
            overflow(option("Option 1"), option("Option 2")).value({"k": "v"}),
        ).trisection_layout(),
        action(
            select_menu(option("Option 1"), option("Option 2"))
            .placeholder("select")
            .value({"k": "v"}),
        ),
        note().add_text(text("Note **Text**").lark_md()),
        markdown("**Summary**").align_center(),
    )
    .wathet()
    .title("Card Title")
    .update_multi(True)
)

payload = message_card.render()   # nested dicts and lists
body = str(message_card)          # indented JSON text, same as message_card.to_json()
```

The JSON text is indented by two spaces and keeps non-ASCII characters as
they are, while `<`, `>` and `&` are written as `\u003c`, `\u003e` and
`\u0026`.

### Available elements

| Module | Factories |
| --- | --- |
| `larkit.card.elements` | `text`, `markdown`, `url`, `confirm`, `hr`, `field`, `option` |
| `larkit.card.interactive` | `action`, `button`, `overflow`, `select_menu`, `multi_select_menu`, `form` |
| `larkit.card.pickers` | `date_picker`, `datetime_picker`, `time_picker`, `picker_datetime`, `input_field` |
| `larkit.card.layout` | `div`, `img`, `note`, `column_set`, `column`, `column_set_action` |
| `larkit.card.card` | `card` |
| `larkit.card.i18n` | `card`, `with_locale`, `localized_text`, `text` |

Header colours are set with `blue()`, `wathet()`, `turquoise()`, `green()`,
`yellow()`, `orange()`, `red()`, `carmine()`, `violet()`, `purple()`,
`indigo()` and `grey()`. `no_forward()` disables forwarding, and
`link(url().href(...))` makes the whole card clickable.

Pickers accept either text or Python date/time objects:
`date_picker().initial_date(datetime.date(2024, 1, 31))` renders
`"initial_date": "2024-01-31"`, `datetime_picker().initial_datetime(...)`
uses `YYYY-MM-DD HH:MM` and `time_picker().initial_time(...)` uses `HH:MM`.

### Column sets

```python
from larkit.card.elements import markdown, url
from larkit.card.layout import column, column_set, column_set_action

stats = (
    column_set(
        column(markdown("Approved\n**29**").align_center()).width("weighted").weight(1),
        column(markdown("Pending\n**25%**").align_center()).width("weighted").weight(1),
    )
    .flex_mode("bisect")
    .background_style("grey")
    .action(column_set_action(url().href("https://example.com/")))
)
```

A column set's flex mode is `"none"` unless set otherwise.

### Localized cards

```python
from larkit.card import i18n
from larkit.card.elements import field, text
from larkit.card.layout import div

localized = (
    i18n.card(
        i18n.with_locale("en_us", div(field(text("English content")))),
        i18n.with_locale("ja_jp", div(field(text("日本語コンテンツ")))),
    )
    .title(
        i18n.localized_text("en_us", "English Title"),
        i18n.localized_text("ja_jp", "日本語タイトル"),
    )
    .red()
)
print(localized)
```

A localized card must be given a title before it is rendered; otherwise
`render()` raises `ValueError`.

## Event decryption and webhook signing

```python
import time

from larkit.crypto import decrypt, encrypt_key, gen_sign

# Decrypt the "encrypt" field of an event callback.
aes_key = encrypt_key("secret")
encrypted_field = "..."  # the base64 text received in the callback
plaintext = decrypt(aes_key, encrypted_field)

# Sign a request for a notification bot configured with a signing secret.
timestamp = int(time.time())
signature = gen_sign("secret", timestamp)
```

`encrypt_key` derives the 32-byte AES key as the SHA-256 digest of the
configured key. `decrypt` returns bytes and raises `ValueError` when the data
is not valid base64, is not a whole number of AES blocks, or decrypts to a
message shorter than one block.

## What this package does not do

larkit only builds card payloads and handles callback crypto. It has no API
client: it does not obtain access tokens, send, reply to, update or recall
messages, upload images or files, manage groups or look up users. Send the
rendered cards with the HTTP client of your choice.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.