"""Gift and guard-purchase commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BatchComboSend:
    """Batch combo part of a gift message."""

    action: str = ""
    batch_combo_id: str = ""
    batch_combo_num: int = 0
    blind_gift: Any = None
    gift_id: int = 0
    gift_name: str = ""
    gift_num: int = 0
    send_master: Any = None
    uid: int = 0
    uname: str = ""


@dataclass
class ComboSend:
    """Combo part of a gift message."""

    action: str = ""
    combo_id: str = ""
    combo_num: int = 0
    gift_id: int = 0
    gift_name: str = ""
    gift_num: int = 0
    send_master: Any = None
    uid: int = 0
    uname: str = ""


@dataclass
class MedalInfo:
    """Fan medal worn by the sender."""

    anchor_roomid: int = 0
    anchor_uname: str = ""
    guard_level: int = 0
    icon_id: int = 0
    is_lighted: int = 0
    medal_color: int = 0
    medal_color_border: int = 0
    medal_color_end: int = 0
    medal_color_start: int = 0
    medal_level: int = 0
    medal_name: str = ""
    special: str = ""
    target_id: int = 0


@dataclass
class SendGiftData:
    """Details of a gift sent in the room."""

    action: str = ""
    batch_combo_id: str = ""
    batch_combo_send: BatchComboSend = field(default_factory=BatchComboSend)
    beat_id: str = field(default="", metadata={"json": "beatId"})
    biz_source: str = ""
    blind_gift: Any = None
    broadcast_id: int = 0
    coin_type: str = ""
    combo_resources_id: int = 0
    combo_send: ComboSend = field(default_factory=ComboSend)
    combo_stay_time: int = 0
    combo_total_coin: int = 0
    crit_prob: int = 0
    demarcation: int = 0
    dmscore: int = 0
    draw: int = 0
    effect: int = 0
    effect_block: int = 0
    face: str = ""
    gift_id: int = field(default=0, metadata={"json": "giftId"})
    gift_name: str = field(default="", metadata={"json": "giftName"})
    gift_type: int = field(default=0, metadata={"json": "giftType"})
    gold: int = 0
    guard_level: int = 0
    is_first: bool = False
    is_special_batch: int = 0
    magnification: float = 0.0
    medal_info: MedalInfo = field(default_factory=MedalInfo)
    name_color: str = ""
    num: int = 0
    original_gift_name: str = ""
    price: int = 0
    rcost: int = 0
    remain: int = 0
    rnd: str = ""
    send_master: Any = None
    silver: int = 0
    super: int = 0
    super_batch_gift_num: int = 0
    super_gift_num: int = 0
    svga_block: int = 0
    tag_image: str = ""
    tid: str = ""
    timestamp: int = 0
    top_list: Any = None
    total_coin: int = 0
    uid: int = 0
    uname: str = ""


@dataclass
class SendGift:
    """``SEND_GIFT`` command."""

    cmd: str = ""
    data: SendGiftData = field(default_factory=SendGiftData)


@dataclass
class UserToastMsgData:
    """Notice of a guard purchase or renewal."""

    anchor_show: bool = False
    color: str = ""
    dmscore: int = 0
    end_time: int = 0
    guard_level: int = 0
    is_show: int = 0
    num: int = 0
    op_type: int = 0
    payflow_id: str = ""
    price: int = 0
    role_name: str = ""
    start_time: int = 0
    svga_block: int = 0
    target_guard_count: int = 0
    toast_msg: str = ""
    uid: int = 0
    unit: str = ""
    user_show: bool = False
    username: str = ""


@dataclass
class UserToastMsg:
    """``USER_TOAST_MSG`` command."""

    cmd: str = ""
    data: UserToastMsgData = field(default_factory=UserToastMsgData)