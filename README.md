# zbplugin

Building blocks for a group-chat bot: a command-line launcher that builds,
saves and loads the bot configuration, and a set of independent modules —
text toys, moderation helpers, bilibili link and message handling, and small
SQLite-backed collections — that can be used on their own from Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The launcher

Installing the package provides the `zbplugin` command.

```
zbplugin -u ws://127.0.0.1:6700 -t token -n 智慧的草神 -p / 123456789
```

Options:

| flag | meaning | default |
|------|---------|---------|
| `-d` | debug level logging | off |
| `-w` | warning level logging (wins over `-d`) | off |
| `-h` | show usage and exit | |
| `-t` | access token of the WebSocket client | empty |
| `-u` | URL of the WebSocket client | `ws://127.0.0.1:6700` |
| `-n` | default nickname | `智慧的草神` |
| `-p` | command prefix | `/` |
| `-c` | read the configuration from a JSON file | |
| `-s` | save the configuration built from the flags to a file and exit | |
| `-l` | response latency in milliseconds | `233` |
| `-r` | receiving ring buffer size | `4096` |
| `-x` | maximum process time in minutes | `4` |

Trailing arguments that are integers are taken as super-user account ids;
anything else is ignored. The nickname given with `-n` is followed by the
fixed extra nicknames `ATRI`, `atri`, `小草神` and `アトリ`.

Save a configuration once and reuse it:

```
zbplugin -s config.json -t token 123456789
zbplugin -c config.json
```

When `-c` is given, `-s` has no effect. The file is one line of JSON with a
`zero` object (nicknames, prefix, super users, ring length, and latency and
maximum process time in nanoseconds), a `ws` list of clients and a `wss` list
of servers.

Without `-s` the launcher prints the version banner and logs how many
connections the configuration holds, then exits with status 0.

From Python the same pieces are available as `zbplugin.cli.build_parser`,
`parse_args`, `load_config`, `save_config`, `main` and the `BotConfig` /
`WSClient` classes.

## Modules

```python
from zbplugin.chrev import flip

flip("I love you")   # 'noʎ ǝʌol I'
```

```python
import random
from zbplugin.choose import choose

print(choose("可口可乐还是百事可乐", "alice", random.Random(1)))
```

```python
import random
from zbplugin.breakrepeat import RepeatBreaker

breaker = RepeatBreaker(3, random.Random(0))
for _ in range(5):
    reply = breaker.feed(42, "复读复读复读")
```

The rest:

- `zbplugin.message` — message segments (`Segment`, `text`, `image`,
  `image_bytes`, `record`, `at`, `reply`) and `plain_text`.
- `zbplugin.logformat` — `ColorFormatter`, a coloured `logging` formatter,
  and `level_color`.
- `zbplugin.banner` — `make_banner`, and `latest_tag`, `render_module` and
  `generate`, which runs `git tag` and writes a module with the newest tag and
  the build time.
- `zbplugin.chat` — `AirConditioner`, `TokenBucket`, `PokeResponder`,
  `name_call_reply`.
- `zbplugin.links` — `waifu_image_url`, `alipay_voice_url`, `baidu_search_url`.
- `zbplugin.sysstatus` — CPU, memory and disk usage via psutil
  (`status_report`) and the rate-limit codec `encode_limit` / `decode_limit` /
  `parse_limit`.
- `zbplugin.ahsai` — command parsing and speaker selection for text-to-speech
  voices (`parse_command`, `find_speaker`, `speaker_menu`, `pick_by_index`).
- `zbplugin.atri` — time-of-day aware canned replies (`respond` and the
  greeting functions).
- `zbplugin.antiabuse` — `AntiAbuseDB`, a per-group forbidden-word store with
  ban records.
- `zbplugin.aipaint_config` — `ServerConfig`, a JSON-backed server setting.
- `zbplugin.cangtoushi` — `PoemClient`, which fetches acrostic and telestich
  poems from a poetry website over HTTP.
- `zbplugin.baiduaudit` — content-audit settings per group, result parsing and
  the violation check (`check_violation`).
- `zbplugin.bilibili_cards` — turn bilibili dynamics, articles, videos and live
  rooms, given as already fetched JSON data, into message chains.
- `zbplugin.bilibili_links` — recognise bilibili links (`match_link`,
  `find_short_link`, `LinkKind`).
- `zbplugin.bilibili_store` — `PushStore` and `VupStore` subscription tables.
- `zbplugin.bookreview`, `zbplugin.cpstory`, `zbplugin.curse`,
  `zbplugin.diana`, `zbplugin.chouxianghua` — readers for SQLite collections
  (`BookReviews`, `CpStories`, `Curses`, `Essays`, `Abstractifier`).

## What the package does not do

- The launcher does not connect to a chat server, receive messages or run
  the modules as a bot; it only builds, saves and loads the configuration.
- Nothing here sends messages, deletes them or bans users. Functions such as
  `check_violation` and `AntiAbuseDB.expire_bans` return what should be done;
  acting on it is up to the caller.
- No speech is synthesised and no content-audit service is called; the
  modules only prepare and interpret the data.
- Apart from `PoemClient`, nothing fetches data from bilibili or other web
  services.
- No data is shipped with the package: the SQLite-backed readers create empty
  tables when the database is new, and the contents must be provided.