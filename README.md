# bililive

Building blocks for a bilibili live-room client:

- **Typed broadcast messages.** The JSON commands that a live room pushes over
  its message socket are turned into plain dataclasses. Examples are
  `WatchedChange`, `SendGift`, `UserToastMsg`, `HotRankChangedV2`,
  `PkBattleStartNew` and `VoiceJoinStatus`.
- **A rate limiter.** `RateLimiter` is a thread-safe token bucket for pacing
  outgoing requests.

The package has no runtime dependencies.

## Installation

```
pip install bililive
```

To install the test dependencies as well:

```
pip install "bililive[test]"
```

## Decoding room messages

`bililive.wsmsg` provides two functions that work on any of the message
classes:

- `decode(cls, payload)` builds an instance of `cls` from an already parsed
  JSON object, such as a `dict`.
- `decode_json(cls, text)` first parses `text` (`str` or `bytes`) as JSON, then
  decodes it in the same way.

```python
from bililive.wsmsg import WatchedChange, decode_json

msg = decode_json(
    WatchedChange,
    '{"cmd":"WATCHED_CHANGE","data":{"num":1024,"text_small":"1024","text_large":"1024人看过"}}',
)
print(msg.cmd, msg.data.num, msg.data.text_large)
```

Decoding follows these rules:

- **Missing keys.** A key missing from the payload leaves the field at its zero
  value, which may be `""`, `0`, `0.0`, `False`, an empty list or an empty
  nested object.
- **Unknown keys.** Keys the class does not know are ignored.
- **`null`.** A `null` value leaves the field at its default. Fields typed
  `Any` are the exception and keep the `null`.
- **Key case.** If no key matches exactly, a key that matches without regard
  to case is used.
- **Renamed keys.** A few fields have names that differ from their JSON keys.
  `LittleMessageBoxData.from_` reads `"from"`. `SendGiftData.beat_id`,
  `gift_id`, `gift_name` and `gift_type` read `"beatId"`, `"giftId"`,
  `"giftName"` and `"giftType"`.
- **Errors.** A value of the wrong JSON type raises `ValueError`. The message
  gives the path to the value, for example `SendGift.data.num`. Passing a
  class that is not a dataclass raises `TypeError`.

The message classes are grouped by theme:

| module                 | messages                                                                                                 |
|------------------------|----------------------------------------------------------------------------------------------------------|
| `bililive.wsmsg`       | `WatchedChange`                                                                                          |
| `bililive.msg_general` | `EntryEffectMustReceive`, `HotRankChanged`, `HotRankChangedV2`, `HotRankSettlement`, `HotRankSettlementV2`, `LittleMessageBox`, `MessageboxUserMedalChange`, `StopLiveRoomList`, `VtrGiftLottery` |
| `bililive.msg_pk`      | `PkBattlePreNew`, `PkBattleProcessNew`, `PkBattleStartNew`, `PkLotteryStart`, `VoiceJoinList`, `VoiceJoinRoomCountInfo`, `VoiceJoinStatus` |
| `bililive.msg_gift`    | `SendGift` (with `BatchComboSend`, `ComboSend`, `MedalInfo`) and `UserToastMsg`                          |

Each message has a `cmd` field and a `data` field that holds the matching
`...Data` class. Some messages have extra top-level fields:

- The PK battle messages have `pk_id`, `pk_status` and `timestamp`.
- Several messages have a top-level `roomid`. It is a string in
  `PkBattleStartNew` and an integer everywhere else.

## Rate limiting

```python
from bililive.limiter import RateLimiter

limiter = RateLimiter(1, 5000, 20000)  # burst, interval in ms, timeout in ms
if limiter.acquire():
    ...  # go ahead
else:
    ...  # no token became free within 20 s
```

The bucket starts full. It gains one token every `interval_ms` and never holds
more than `burst` tokens. `acquire` blocks until it can take a token and then
returns `True`. If no token becomes free within `timeout_ms`, it returns
`False`. The constructor raises `ValueError` in three cases:

- `burst` is less than 1;
- `interval_ms` is not positive;
- `timeout_ms` is negative.

## What this package does not do

The package only decodes message payloads and paces calls. It does not:

- connect to a live room's message socket;
- log in or manage cookies;
- send danmu, gifts or private messages through the HTTP API.

There is no command-line program.