"""Room notices: entry effects, hot ranks, message boxes, medals and lotteries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EntryEffectData:
    """Entry effect shown when a viewer joins the room."""

    id: int = 0
    uid: int = 0
    target_id: int = 0
    mock_effect: int = 0
    face: str = ""
    privilege_type: int = 0
    copy_writing: str = ""
    copy_color: str = ""
    highlight_color: str = ""
    priority: int = 0
    basemap_url: str = ""
    show_avatar: int = 0
    effective_time: int = 0
    web_basemap_url: str = ""
    web_effective_time: int = 0
    web_effect_close: int = 0
    web_close_time: int = 0
    business: int = 0
    copy_writing_v2: str = ""
    icon_list: list[int] = field(default_factory=list)
    max_delay_time: int = 0


@dataclass
class EntryEffectMustReceive:
    """``ENTRY_EFFECT_MUST_RECEIVE`` command."""

    cmd: str = ""
    data: EntryEffectData = field(default_factory=EntryEffectData)


@dataclass
class HotRankChangedData:
    """Current hot-rank position of the room."""

    rank: int = 0
    trend: int = 0
    countdown: int = 0
    timestamp: int = 0
    web_url: str = ""
    live_url: str = ""
    blink_url: str = ""
    live_link_url: str = ""
    pc_link_url: str = ""
    icon: str = ""
    area_name: str = ""


@dataclass
class HotRankChanged:
    """``HOT_RANK_CHANGED`` command."""

    cmd: str = ""
    data: HotRankChangedData = field(default_factory=HotRankChangedData)


@dataclass
class HotRankChangedV2Data(HotRankChangedData):
    """Hot-rank position with a rank description."""

    rank_desc: str = ""


@dataclass
class HotRankChangedV2:
    """``HOT_RANK_CHANGED_V2`` command."""

    cmd: str = ""
    data: HotRankChangedV2Data = field(default_factory=HotRankChangedV2Data)


@dataclass
class HotRankSettlementData:
    """Final hot-rank result for a period."""

    rank: int = 0
    uname: str = ""
    face: str = ""
    timestamp: int = 0
    icon: str = ""
    area_name: str = ""
    url: str = ""
    cache_key: str = ""
    dm_msg: str = ""


@dataclass
class HotRankSettlement:
    """``HOT_RANK_SETTLEMENT`` command."""

    cmd: str = ""
    data: HotRankSettlementData = field(default_factory=HotRankSettlementData)


@dataclass
class HotRankSettlementV2Data(HotRankSettlementData):
    """Final hot-rank result, second message version."""


@dataclass
class HotRankSettlementV2:
    """``HOT_RANK_SETTLEMENT_V2`` command."""

    cmd: str = ""
    data: HotRankSettlementV2Data = field(default_factory=HotRankSettlementV2Data)


@dataclass
class MessageBoxPlatform:
    """Platforms on which a message box is shown."""

    android: bool = False
    ios: bool = False
    web: bool = False


@dataclass
class LittleMessageBoxData:
    """Small notice box contents."""

    from_: str = field(default="", metadata={"json": "from"})
    platform: MessageBoxPlatform = field(default_factory=MessageBoxPlatform)
    msg: str = ""
    room_id: int = 0
    type: int = 0


@dataclass
class LittleMessageBox:
    """``LITTLE_MESSAGE_BOX`` command."""

    cmd: str = ""
    data: LittleMessageBoxData = field(default_factory=LittleMessageBoxData)


@dataclass
class MedalChangeData:
    """Change of a user's fan medal."""

    type: int = 0
    uid: int = 0
    up_uid: int = 0
    medal_name: str = ""
    medal_level: int = 0
    medal_color_start: int = 0
    medal_color_end: int = 0
    medal_color_border: int = 0
    guard_level: int = 0
    is_lighted: int = 0
    unlock: int = 0
    unlock_level: int = 0
    multi_unlock_level: str = ""
    upper_bound_content: str = ""


@dataclass
class MessageboxUserMedalChange:
    """``MESSAGEBOX_USER_MEDAL_CHANGE`` command."""

    cmd: str = ""
    data: MedalChangeData = field(default_factory=MedalChangeData)


@dataclass
class StopLiveRoomListData:
    """Rooms that have stopped broadcasting."""

    room_id_list: list[int] = field(default_factory=list)


@dataclass
class StopLiveRoomList:
    """``STOP_LIVE_ROOM_LIST`` command."""

    cmd: str = ""
    data: StopLiveRoomListData = field(default_factory=StopLiveRoomListData)


@dataclass
class VtrGiftLotteryData:
    """Result of a gift-triggered lottery."""

    act_name: str = ""
    award_username: str = ""
    interact_msg: str = ""
    toast_msg: str = ""
    room_id: int = 0
    uid: int = 0
    highlight_col: str = ""
    dark_highlight_col: str = ""
    lottery_id: str = ""


@dataclass
class VtrGiftLottery:
    """``VTR_GIFT_LOTTERY`` command."""

    cmd: str = ""
    data: VtrGiftLotteryData = field(default_factory=VtrGiftLotteryData)