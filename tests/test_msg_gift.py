import json

import pytest

from bililive.msg_gift import (
    BatchComboSend,
    ComboSend,
    MedalInfo,
    SendGift,
    SendGiftData,
    UserToastMsg,
    UserToastMsgData,
)
from bililive.wsmsg import decode, decode_json

SEND_GIFT_SAMPLE = {
    "cmd": "SEND_GIFT",
    "data": {
        "action": "投喂",
        "batch_combo_id": "batch:gift:combo_id:1001:2002:20004:1623602183.2621",
        "batch_combo_send": {
            "action": "投喂",
            "batch_combo_id": "batch:gift:combo_id:1001:2002:20004:1623602183.2621",
            "batch_combo_num": 1,
            "blind_gift": None,
            "gift_id": 20004,
            "gift_name": "吃瓜",
            "gift_num": 1,
            "send_master": None,
            "uid": 1001,
            "uname": "viewer",
        },
        "beatId": "",
        "biz_source": "Live",
        "blind_gift": None,
        "broadcast_id": 0,
        "coin_type": "gold",
        "combo_resources_id": 1,
        "combo_send": {
            "action": "投喂",
            "combo_id": "gift:combo_id:1001:2002:20004:1623602183.2615",
            "combo_num": 1,
            "gift_id": 20004,
            "gift_name": "吃瓜",
            "gift_num": 1,
            "send_master": None,
            "uid": 1001,
            "uname": "viewer",
        },
        "combo_stay_time": 3,
        "combo_total_coin": 100,
        "crit_prob": 0,
        "demarcation": 1,
        "dmscore": 16,
        "draw": 0,
        "effect": 0,
        "effect_block": 0,
        "face": "http://i2.hdslb.com/bfs/face/example.jpg",
        "giftId": 20004,
        "giftName": "吃瓜",
        "giftType": 1,
        "gold": 0,
        "guard_level": 0,
        "is_first": True,
        "is_special_batch": 0,
        "magnification": 1,
        "medal_info": {
            "anchor_roomid": 0,
            "anchor_uname": "",
            "guard_level": 0,
            "icon_id": 0,
            "is_lighted": 0,
            "medal_color": 6067854,
            "medal_color_border": 12632256,
            "medal_color_end": 12632256,
            "medal_color_start": 12632256,
            "medal_level": 1,
            "medal_name": "少废话",
            "special": "",
            "target_id": 3003,
        },
        "name_color": "",
        "num": 1,
        "original_gift_name": "",
        "price": 100,
        "rcost": 3892073142,
        "remain": 0,
        "rnd": "1332407012",
        "send_master": None,
        "silver": 0,
        "super": 0,
        "super_batch_gift_num": 1,
        "super_gift_num": 1,
        "svga_block": 0,
        "tag_image": "",
        "tid": "1623602183121500002",
        "timestamp": 1623602183,
        "top_list": None,
        "total_coin": 100,
        "uid": 1001,
        "uname": "viewer",
    },
}

USER_TOAST_SAMPLE = {
    "cmd": "USER_TOAST_MSG",
    "data": {
        "anchor_show": True,
        "color": "#00D1F1",
        "dmscore": 90,
        "end_time": 1623612866,
        "guard_level": 3,
        "is_show": 0,
        "num": 1,
        "op_type": 3,
        "payflow_id": "PAYFLOW-0001",
        "price": 138000,
        "role_name": "舰长",
        "start_time": 1623612866,
        "svga_block": 0,
        "target_guard_count": 820,
        "toast_msg": "<%viewer%> 自动续费了舰长",
        "uid": 4004,
        "unit": "月",
        "user_show": True,
        "username": "viewer",
    },
}


def test_send_gift_top_level_fields():
    msg = decode(SendGift, SEND_GIFT_SAMPLE)
    assert msg.cmd == "SEND_GIFT"
    assert msg.data.action == "投喂"
    assert msg.data.gift_id == 20004
    assert msg.data.gift_name == "吃瓜"
    assert msg.data.gift_type == 1
    assert msg.data.rcost == 3892073142
    assert msg.data.tid == "1623602183121500002"
    assert msg.data.is_first is True


def test_send_gift_camel_case_keys_are_mapped():
    payload = {"giftId": 7, "giftName": "flower", "giftType": 2, "beatId": "b1"}
    data = decode(SendGiftData, payload)
    assert (data.gift_id, data.gift_name, data.gift_type, data.beat_id) == (7, "flower", 2, "b1")


def test_send_gift_nested_parts():
    msg = decode(SendGift, SEND_GIFT_SAMPLE)
    assert msg.data.combo_send == ComboSend(
        action="投喂",
        combo_id="gift:combo_id:1001:2002:20004:1623602183.2615",
        combo_num=1,
        gift_id=20004,
        gift_name="吃瓜",
        gift_num=1,
        send_master=None,
        uid=1001,
        uname="viewer",
    )
    assert msg.data.batch_combo_send.batch_combo_num == 1
    assert msg.data.medal_info.medal_name == "少废话"
    assert msg.data.medal_info.target_id == 3003


def test_magnification_integer_becomes_float():
    msg = decode(SendGift, SEND_GIFT_SAMPLE)
    assert msg.data.magnification == 1.0
    assert isinstance(msg.data.magnification, float)


def test_any_fields_keep_raw_values():
    payload = {"blind_gift": {"gift_id": 1}, "top_list": [1, 2], "send_master": None}
    data = decode(SendGiftData, payload)
    assert data.blind_gift == {"gift_id": 1}
    assert data.top_list == [1, 2]
    assert data.send_master is None


def test_send_gift_from_json_text_matches_dict_decode():
    text = json.dumps(SEND_GIFT_SAMPLE, ensure_ascii=False).encode("utf-8")
    assert decode_json(SendGift, text) == decode(SendGift, SEND_GIFT_SAMPLE)


def test_send_gift_defaults_when_data_missing():
    msg = decode(SendGift, {"cmd": "SEND_GIFT"})
    assert msg.data == SendGiftData()
    assert msg.data.medal_info == MedalInfo()
    assert msg.data.batch_combo_send == BatchComboSend()


def test_send_gift_wrong_type_raises():
    with pytest.raises(ValueError):
        decode(SendGift, {"cmd": "SEND_GIFT", "data": {"num": "one"}})


def test_send_gift_rnd_must_be_string():
    with pytest.raises(ValueError):
        decode(SendGiftData, {"rnd": 1332407012})


def test_user_toast_msg_fields():
    msg = decode(UserToastMsg, USER_TOAST_SAMPLE)
    assert msg.cmd == "USER_TOAST_MSG"
    assert msg.data.role_name == "舰长"
    assert msg.data.price == 138000
    assert msg.data.guard_level == 3
    assert msg.data.unit == "月"
    assert msg.data.anchor_show is True
    assert msg.data.user_show is True
    assert msg.data.target_guard_count == 820


def test_user_toast_msg_defaults():
    msg = decode(UserToastMsg, {"cmd": "USER_TOAST_MSG", "data": {}})
    assert msg.data == UserToastMsgData()


def test_user_toast_msg_bool_field_rejects_int():
    with pytest.raises(ValueError):
        decode(UserToastMsgData, {"user_show": 1})