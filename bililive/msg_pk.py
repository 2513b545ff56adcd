"""PK battle, PK lottery and voice-join commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PkBattlePreNewData:
    """Opponent details announced before a PK battle."""

    battle_type: int = 0
    match_type: int = 0
    uname: str = ""
    face: str = ""
    uid: int = 0
    room_id: int = 0
    season_id: int = 0
    pre_timer: int = 0
    pk_votes_name: str = ""
    end_win_task: Any = None


@dataclass
class PkBattlePreNew:
    """``PK_BATTLE_PRE_NEW`` command."""

    cmd: str = ""
    pk_status: int = 0
    pk_id: int = 0
    timestamp: int = 0
    data: PkBattlePreNewData = field(default_factory=PkBattlePreNewData)
    roomid: int = 0


@dataclass
class PkVoteInfo:
    """Vote tally of one side of a PK battle."""

    room_id: int = 0
    votes: int = 0
    best_uname: str = ""


@dataclass
class PkBattleProcessNewData:
    """Vote tallies of both sides."""

    battle_type: int = 0
    init_info: PkVoteInfo = field(default_factory=PkVoteInfo)
    match_info: PkVoteInfo = field(default_factory=PkVoteInfo)


@dataclass
class PkBattleProcessNew:
    """``PK_BATTLE_PROCESS_NEW`` command."""

    cmd: str = ""
    pk_id: int = 0
    pk_status: int = 0
    timestamp: int = 0
    data: PkBattleProcessNewData = field(default_factory=PkBattleProcessNewData)


@dataclass
class PkBattleStartNewData:
    """Timing and vote settings of a starting PK battle."""

    battle_type: int = 0
    final_hit_votes: int = 0
    pk_start_time: int = 0
    pk_frozen_time: int = 0
    pk_end_time: int = 0
    pk_votes_type: int = 0
    pk_votes_add: int = 0
    pk_votes_name: str = ""
    star_light_msg: str = ""


@dataclass
class PkBattleStartNew:
    """``PK_BATTLE_START_NEW`` command; its room id arrives as a string."""

    cmd: str = ""
    pk_id: int = 0
    pk_status: int = 0
    timestamp: int = 0
    data: PkBattleStartNewData = field(default_factory=PkBattleStartNewData)
    roomid: str = ""


@dataclass
class PkLotteryUser:
    """User who triggered a PK lottery."""

    face: str = ""
    uid: int = 0
    uname: str = ""


@dataclass
class PkLotteryStartData:
    """PK lottery details."""

    asset_animation_pic: str = ""
    asset_icon: str = ""
    from_user: PkLotteryUser = field(default_factory=PkLotteryUser)
    id: int = 0
    max_time: int = 0
    pk_id: int = 0
    room_id: int = 0
    thank_text: str = ""
    time: int = 0
    time_wait: int = 0
    title: str = ""
    weight: int = 0


@dataclass
class PkLotteryStart:
    """``PK_LOTTERY_START`` command."""

    cmd: str = ""
    data: PkLotteryStartData = field(default_factory=PkLotteryStartData)


@dataclass
class VoiceJoinListData:
    """Pending voice-join applications."""

    room_id: int = 0
    category: int = 0
    apply_count: int = 0
    red_point: int = 0
    refresh: int = 0


@dataclass
class VoiceJoinList:
    """``VOICE_JOIN_LIST`` command."""

    cmd: str = ""
    data: VoiceJoinListData = field(default_factory=VoiceJoinListData)
    roomid: int = 0


@dataclass
class VoiceJoinRoomCountInfoData:
    """Voice-join counters of a room."""

    room_id: int = 0
    root_status: int = 0
    room_status: int = 0
    apply_count: int = 0
    notify_count: int = 0
    red_point: int = 0


@dataclass
class VoiceJoinRoomCountInfo:
    """``VOICE_JOIN_ROOM_COUNT_INFO`` command."""

    cmd: str = ""
    data: VoiceJoinRoomCountInfoData = field(default_factory=VoiceJoinRoomCountInfoData)
    roomid: int = 0


@dataclass
class VoiceJoinStatusData:
    """State of the current voice connection."""

    room_id: int = 0
    status: int = 0
    channel: str = ""
    channel_type: str = ""
    uid: int = 0
    user_name: str = ""
    head_pic: str = ""
    guard: int = 0
    start_at: int = 0
    current_time: int = 0
    web_share_link: str = ""


@dataclass
class VoiceJoinStatus:
    """``VOICE_JOIN_STATUS`` command."""

    cmd: str = ""
    data: VoiceJoinStatusData = field(default_factory=VoiceJoinStatusData)
    roomid: int = 0