"""Canned persona replies: greetings, praise and reactions by time of day."""

from __future__ import annotations

import random

from zbplugin import message as msg

DATA_FOLDER = "data/Atri/"


def _split(block: str) -> tuple[str, ...]:
    return tuple(block.split("|"))


ROBOT_TEXTS = _split("萝卜子是对机器人的蔑称！|是亚托莉......萝卜子可是对机器人的蔑称")

SLEEP_TALK = _split(
    "zzzz......|zzzzzzzz......|zzz...好涩哦..zzz....|"
    "别...不要..zzz..那..zzz..|嘻嘻..zzz..呐~..zzzz..|...zzz....哧溜哧溜...."
)

MORNING_EARLY = _split(
    "啊......早上好...(哈欠)|唔......吧唧...早上...哈啊啊~~~\n早上好......|"
    "早上好......|早上好呜......呼啊啊~~~~|啊......早上好。\n昨晚也很激情呢！|"
    "吧唧吧唧......怎么了...已经早上了么...|早上好！|"
    "......看起来像是傍晚，其实已经早上了吗？|早上好......欸~~~脸好近呢"
)

MORNING_LATE = _split(
    "哼！这个点还早啥，昨晚干啥去了！？|熬夜了对吧熬夜了对吧熬夜了对吧？？？！|"
    "是不是熬夜是不是熬夜是不是熬夜？！"
)

MORNING_EVENING = _split("早个啥？哼唧！我都准备洗洗睡了！|不是...你看看几点了，哼！|晚上好哇")

NOON = _split(
    "午安w|午觉要好好睡哦，ATRI会陪伴在你身旁的w|"
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o|睡你午觉去！哼唧！！"
)

NIGHT_MORNING = _split(
    "你可猝死算了吧！|？啊这|亲，这边建议赶快去睡觉呢~~~|不可忍不可忍不可忍！！为何这还不猝死！！"
)

NIGHT_AFTERNOON = _split(
    "难不成？？晚上不想睡觉？？现在休息|就......挺离谱的...现在睡觉|现在还是白天哦，睡觉还太早了"
)

NIGHT_EVENING = _split(
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o|......(打瞌睡)|"
    "呼...呼...已经睡着了哦~...呼......|......我、我会在这守着你的，请务必好好睡着"
)

SUGOI = _split(
    "当然，我是高性能的嘛~！|小事一桩，我是高性能的嘛|怎么样？还是我比较高性能吧？|"
    "哼哼！我果然是高性能的呢！|因为我是高性能的嘛！嗯哼！|因为我是高性能的呢！|"
    "哎呀~，我可真是太高性能了|正是，因为我是高性能的|是的。我是高性能的嘛♪|"
    "毕竟我可是高性能的！|嘿嘿，我的高性能发挥出来啦♪|我果然是很高性能的机器人吧！|"
    "是吧！谁叫我这么高性能呢！哼哼！|交给我吧，有高性能的我陪着呢|"
    "呣......我的高性能，毫无遗憾地施展出来了......"
)

FINE = _split(
    "当然，我是高性能的嘛~！|没事没事，因为我是高性能的嘛！嗯哼！|没事的，因为我是高性能的呢！|"
    "正是，因为我是高性能的|是的。我是高性能的嘛♪|毕竟我可是高性能的！|"
    "那种程度的事不算什么的。\n别看我这样，我可是高性能的|没问题的，我可是高性能的"
)

QUESTION_TEXTS = _split("?|？|嗯？|(。´・ω・)ん?|ん？")
HOLD_BACK_TEXTS = _split("不许好！|憋回去！")
REFUSAL = "我无法回应你的请求"

LOVE_WORDS = _split("喜欢|爱你|爱|suki|daisuki|すき|好き|贴贴|老婆|亲一个|mua")
CURSE_WORDS = _split("草你妈|操你妈|脑瘫|废柴|fw|five|废物|战斗|爬|爪巴|sb|SB|傻B")
MORNING_WORDS = _split("早安|早哇|早上好|ohayo|哦哈哟|お早う|早好|早|早早早")
NOON_WORDS = _split("中午好|午安|午好")
NIGHT_WORDS = _split("晚安|oyasuminasai|おやすみなさい|晚好|晚上好")
SUGOI_WORDS = _split("高性能|太棒了|すごい|sugoi|斯国一|よかった")
FINE_WORDS = _split("没事|没关系|大丈夫|还好|不要紧|没出大问题|没伤到哪")
ASK_WORDS = _split("好吗|是吗|行不行|能不能|可不可以")
QUESTION_WORDS = _split("？|?|¿")

LOVE_IMAGES = _split("SUKI.jpg|SUKI1.jpg|SUKI2.png")
ANGRY_IMAGES = _split("FN.jpg|WQ.jpg|WQ1.jpg")
ANSWER_IMAGES = _split("YES.png|NO.jpg")
AZ_IMAGES = _split("AZ.jpg|AZ1.jpg")
WH_IMAGES = _split("WH.jpg|WH1.jpg|WH2.jpg|WH3.jpg")
ROCKET_PUNCH = "RocketPunch.amr"


def is_awake(hour: int) -> bool:
    """False between 1 and 6 o'clock, when no request is answered."""
    return not 1 <= hour < 6


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def morning_greeting(hour: int, rng: random.Random | None = None) -> str | None:
    """The answer to a good-morning at ``hour``."""
    rng = _rng(rng)
    if hour < 6:
        return rng.choice(SLEEP_TALK)
    if hour < 9:
        return rng.choice(MORNING_EARLY)
    if hour < 18:
        return rng.choice(MORNING_LATE)
    if hour < 24:
        return rng.choice(MORNING_EVENING)
    return None


def noon_greeting(hour: int, rng: random.Random | None = None) -> str | None:
    """The answer to a good-noon, given only around midday."""
    if 11 < hour < 15:
        return _rng(rng).choice(NOON)
    return None


def night_greeting(hour: int, rng: random.Random | None = None) -> str | None:
    """The answer to a good-night at ``hour``."""
    rng = _rng(rng)
    if hour < 6:
        return rng.choice(SLEEP_TALK)
    if hour < 11:
        return rng.choice(NIGHT_MORNING)
    if hour < 15:
        return rng.choice(NOON)
    if hour < 19:
        return rng.choice(NIGHT_AFTERNOON)
    if hour < 24:
        return rng.choice(NIGHT_EVENING)
    return None


def _image(rng: random.Random, names: tuple[str, ...]) -> msg.Segment:
    return msg.image(DATA_FOLDER + rng.choice(names))


def _texts(line: str | None) -> list[msg.Segment]:
    return [] if line is None else [msg.text(line)]


def _contains(text: str, words: tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def _question_reaction(rng: random.Random, images: tuple[str, ...]) -> list[msg.Segment]:
    roll = rng.randrange(5)
    if roll == 0:
        return [msg.text(rng.choice(QUESTION_TEXTS))]
    if roll in (1, 2):
        return [_image(rng, images)]
    return []


def respond(
    message: str, hour: int, to_me: bool = False, rng: random.Random | None = None
) -> list[msg.Segment] | None:
    """The segments to answer ``message`` with.

    None when no rule matches or while asleep; an empty list when a rule
    matches but chooses to stay silent.
    """
    if not is_awake(hour):
        return None
    rng = _rng(rng)
    text = message.strip()

    if text == "萝卜子":
        if rng.randrange(2) == 0:
            return [msg.text(rng.choice(ROBOT_TEXTS))]
        return [msg.record(DATA_FOLDER + ROCKET_PUNCH)]
    if to_me and text in LOVE_WORDS:
        return [_image(rng, LOVE_IMAGES)]
    if to_me and _contains(text, CURSE_WORDS):
        return [_image(rng, ANGRY_IMAGES)]
    if text in MORNING_WORDS:
        return _texts(morning_greeting(hour, rng))
    if text in NOON_WORDS:
        return _texts(noon_greeting(hour, rng))
    if text in NIGHT_WORDS:
        return _texts(night_greeting(hour, rng))
    if to_me and _contains(text, SUGOI_WORDS):
        return [msg.text(rng.choice(SUGOI))]
    if to_me and _contains(text, FINE_WORDS):
        return [msg.text(rng.choice(FINE))]
    if _contains(text, ASK_WORDS):
        return [_image(rng, ANSWER_IMAGES)] if rng.randrange(2) == 0 else []
    if "啊这" in text:
        return [_image(rng, AZ_IMAGES)] if rng.randrange(2) == 0 else []
    if "我好了" in text:
        return [msg.text(rng.choice(HOLD_BACK_TEXTS))]
    if text in QUESTION_WORDS:
        return _question_reaction(rng, WH_IMAGES)
    if "离谱" in text:
        return _question_reaction(rng, WH_IMAGES[:1])
    if to_me and "答应我" in text:
        return [msg.text(REFUSAL)]
    return None