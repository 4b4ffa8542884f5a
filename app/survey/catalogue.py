"""
Digital Wellness Question Catalogue
Version survey_weights_v1

This module contains:
1. QUESTION_CATALOGUE: the 70 bilingual (English + Hindi) survey questions,
   grouped by answer set, in answer order
2. build_catalogue(): catalogue joined with the risk weight table for the
   frontend form and the chat-survey agent

All answers use the same 1-5 agreement scale.
"""

from typing import Any, Dict, List, Tuple

from .weights import WEIGHT_TABLE, WEIGHTS_VERSION, MIN_SCALE, MAX_SCALE

# ============================================================================
# QUESTION CATALOGUE
# (english, hindi) per question, set by set
# ============================================================================

QUESTION_CATALOGUE: Dict[int, List[Tuple[str, str]]] = {
    # ===== SET 1 (questions 1-25) =====
    1: [
        ("Do you stay up late just to finish watching a video or reading posts?",
         "क्या आप वीडियो/पोस्ट देखने के लिए देर तक जागते हैं?"),
        ("Do you feel more confident expressing yourself online than in person?",
         "क्या आप ऑनलाइन खुद को व्यक्त करने में अधिक आत्मविश्वास महसूस करते हैं?"),
        ("Do you get irritated if someone interrupts your online activity?",
         "क्या आपको चिढ़ होती है जब कोई आपकी ऑनलाइन गतिविधि में बाधा डालता है?"),
        ("Do you get distracted by incoming notifications while studying?",
         "क्या पढ़ाई के समय नोटिफिकेशन से ध्यान भटकता है?"),
        ("Have you noticed changes in your mental well-being due to digital overload?",
         "क्या आपने डिजिटल ओवरलोड से मानसिक स्वास्थ्य में बदलाव देखा है?"),
        ("If asked to give up your phone for 24 hours, would you feel anxious or restless?",
         "क्या 24 घंटे फोन छोड़ने पर बेचैनी होगी?"),
        ("Do you spend more than half your waking hours online for non-work activities?",
         "क्या आप अपना आधा समय गैर-कार्य ऑनलाइन गतिविधियों में बिताते हैं?"),
        ("Do you find it hard to stop once you start scrolling on social media?",
         "क्या आपको स्क्रॉलिंग रोकना मुश्किल लगता है?"),
        ("Do you stay online even while spending time with family or friends?",
         "क्या आप परिवार/दोस्तों के साथ रहते हुए भी ऑनलाइन रहते हैं?"),
        ("Do you hide your online habits from friends or family?",
         "क्या आप अपनी ऑनलाइन आदतें छिपाते हैं?"),
        ("Do your screen habits add to your stress or anxiety?",
         "क्या आपकी स्क्रीन आदतें तनाव बढ़ाती हैं?"),
        ("Do you struggle to focus on work without checking your phone?",
         "क्या आपको फोन चेक किए बिना ध्यान लगाना कठिन लगता है?"),
        ("Do you check your phone often between tasks?",
         "क्या आप कार्यों के बीच फोन देखते रहते हैं?"),
        ("Do you multitask between phone and laptop most of the day?",
         "क्या आप दिनभर मल्टीटास्किंग करते हैं?"),
        ("Do you feel uneasy when away from your phone?",
         "क्या फोन से दूर रहने पर असहज महसूस होता है?"),
        ("Do you feel restless when forced to stay offline?",
         "क्या जबरन ऑफलाइन होने पर बेचैनी होती है?"),
        ("Do you feel more productive when you reduce screen time?",
         "क्या स्क्रीन कम करने पर आप अधिक उत्पादक होते हैं?"),
        ("Do you feel disconnected when offline?",
         "क्या ऑफलाइन रहने पर कटाव महसूस होता है?"),
        ("Do you check notifications right after waking up?",
         "क्या आप जागते ही नोटिफिकेशन देखते हैं?"),
        ("Do you feel the urge to pick up your phone even when busy?",
         "क्या व्यस्त होने पर भी फोन उठाने का मन करता है?"),
        ("Do you use multiple screens at once?",
         "क्या आप एक साथ कई स्क्रीन चलाते हैं?"),
        ("Does your mood depend on online likes or comments?",
         "क्या आपका मूड लाइक्स/कमेंट्स पर निर्भर करता है?"),
        ("Do you feel like you've lost control over your internet usage?",
         "क्या आपको लगता है कि आपने नियंत्रण खो दिया है?"),
        ("Do you find emotional comfort in scrolling or chatting online?",
         "क्या आपको स्क्रॉलिंग में मानसिक राहत मिलती है?"),
        ("Do you say \"5 more minutes\" but then spend hours?",
         "क्या \"5 मिनट और\" बोलकर आप घंटों बिताते हैं?"),
    ],
    # ===== SET 2 (questions 26-50) =====
    2: [
        ("Do you feel mentally exhausted after social media?",
         "क्या सोशल मीडिया के बाद मानसिक थकान होती है?"),
        ("Do you feel less energetic due to screen time?",
         "क्या स्क्रीन टाइम से ऊर्जा कम हुई है?"),
        ("Do online interactions make you feel validated?",
         "क्या ऑनलाइन इंटरैक्शन मान्यता देते हैं?"),
        ("Do you get headaches after long online hours?",
         "क्या लंबे समय ऑनलाइन रहने के बाद सिरदर्द होता है?"),
        ("Do you get frustrated when internet is slow?",
         "क्या इंटरनेट धीमा होने पर चिढ़ होती है?"),
        ("Do you find offline time boring?",
         "क्या ऑफलाइन समय उबाऊ लगता है?"),
        ("Do you delay important work to stay online?",
         "क्या आप ऑनलाइन रहने के लिए काम टालते हैं?"),
        ("Does frequent online checking reduce your productivity?",
         "क्या बार-बार ब्रेक से उत्पादकता घटती है?"),
        ("Do you lose track of time online?",
         "क्या ब्राउजिंग करते समय समय का ध्यान नहीं रहता?"),
        ("Have you ever been late because of mobile distraction?",
         "क्या मोबाइल की वजह से देर हुई है?"),
        ("Do you ignore screen-time warning alerts?",
         "क्या आप स्क्रीन टाइम अलर्ट को अनदेखा करते हैं?"),
        ("Do you switch between many tabs/apps frequently?",
         "क्या आप कई टैब/ऐप बदलते रहते हैं?"),
        ("Do you get neck/back pain from screens?",
         "क्या लंबे उपयोग से गर्दन/पीठ दर्द होता है?"),
        ("Do offline tasks feel harder after long online sessions?",
         "क्या लंबे ऑनलाइन समय के बाद ऑफलाइन काम कठिन लगता है?"),
        ("Is a whole day without internet extremely difficult?",
         "क्या बिना इंटरनेट दिन बिताना कठिन है?"),
        ("Has late-night scrolling ruined your sleep?",
         "क्या देर रात स्क्रॉलिंग से नींद खराब हुई है?"),
        ("Does too much screen time reduce your happiness?",
         "क्या आपको लगता है कि स्क्रीन टाइम से खुशी घटती है?"),
        ("Do you feel you could achieve more if you reduced usage?",
         "क्या कम उपयोग से आप अधिक हासिल कर सकते हैं?"),
        ("Do you regret time spent online but still continue?",
         "क्या समय बर्बाद करने पर आपको पछतावा होता है?"),
        ("Do you get anxious when replies are delayed?",
         "क्या देर से जवाब मिलने पर आप चिंतित होते हैं?"),
        ("Has screen time harmed your grades/performance?",
         "क्या स्क्रीन टाइम से प्रदर्शन गिरा है?"),
        ("Do you unlock your phone without purpose?",
         "क्या आप बिना कारण फोन अनलॉक करते हैं?"),
        ("Do you use the internet to escape problems?",
         "क्या ऑनलाइन रहना आपको समस्याओं से दूर रखता है?"),
        ("Do you fear missing out when offline?",
         "क्या ऑफलाइन होने पर मिस होने का डर लगता है?"),
        ("Are you shocked by your screen time reports?",
         "क्या स्क्रीन टाइम रिपोर्ट देखकर आश्चर्य होता है?"),
    ],
    # ===== SET 3 (questions 51-70) =====
    3: [
        ("Have you tried reducing screen time but failed?",
         "क्या आपने स्क्रीन टाइम कम करने की कोशिश की लेकिन असफल रहे?"),
        ("Do you skip physical activity due to online use?",
         "क्या इंटरनेट के कारण आप शारीरिक गतिविधियाँ छोड़ते हैं?"),
        ("Do you use your phone when lonely?",
         "क्या अकेलापन महसूस होने पर आप फोन का सहारा लेते हैं?"),
        ("Do your eyes feel strained after long screen use?",
         "क्या लंबे स्क्रीन उपयोग से आँखों में तनाव होता है?"),
        ("Have you lied about screen time?",
         "क्या आपने स्क्रीन टाइम के बारे में झूठ बोला है?"),
        ("Do you feel tired after long phone use?",
         "क्या लंबे फोन उपयोग के बाद थकान महसूस होती है?"),
        ("Is scrolling part of your bedtime routine?",
         "क्या सोने से पहले स्क्रोल करना आपकी दिनचर्या है?"),
        ("Has online life reduced your offline hobbies?",
         "क्या ऑनलाइन गतिविधियों ने आपकी ऑफलाइन रुचियाँ कम की हैं?"),
        ("Do you use your phone when stressed?",
         "क्या तनाव में आप फोन का उपयोग करते हैं?"),
        ("Has online time affected real-life opportunities?",
         "क्या ऑनलाइन समय ने अवसरों को प्रभावित किया है?"),
        ("Do online experiences alter your mood?",
         "क्या ऑनलाइन अनुभवों से आपका मूड बदलता है?"),
        ("Do you stay online longer than planned?",
         "क्या आप योजना से अधिक समय ऑनलाइन बिताते हैं?"),
        ("Have your relationships weakened because of digital habits?",
         "क्या डिजिटल आदतों ने आपके रिश्ते कमजोर किए हैं?"),
        ("Do you skip meals/sleep to stay online?",
         "क्या आप फोन के कारण भोजन/नींद छोड़ते हैं?"),
        ("Do you meet fewer people offline?",
         "क्या आप पहले से कम लोगों से मिलते हैं?"),
        ("Do you use your phone during meals?",
         "क्या आप भोजन के दौरान फोन का उपयोग करते हैं?"),
        ("Is your phone the last thing you see at night?",
         "क्या सोने से पहले फोन आपकी अंतिम क्रिया है?"),
        ("Do you refresh apps without reason?",
         "क्या आप बिना कारण ऐप्स को रिफ्रेश करते हैं?"),
        ("Have you missed deadlines due to being online?",
         "क्या ऑनलाइन रहने के कारण डेडलाइन मिस हुई है?"),
        ("Do you calm down only after checking notifications?",
         "क्या आप सभी नोटिफिकेशन चेक करने के बाद ही शांत होते हैं?"),
    ],
}

for _w in WEIGHT_TABLE:
    if len(QUESTION_CATALOGUE[_w.set_number]) != _w.length:
        raise ValueError(
            f"Catalogue Set {_w.set_number} has {len(QUESTION_CATALOGUE[_w.set_number])} "
            f"questions, weight table expects {_w.length}"
        )


def build_catalogue() -> Dict[str, Any]:
    """Get the question catalogue joined with weights, for forms and agents."""
    sets = []
    number = 0
    for w in WEIGHT_TABLE:
        questions = []
        for index, (english, hindi) in enumerate(QUESTION_CATALOGUE[w.set_number]):
            number += 1
            questions.append({
                "number": number,
                "index": index,
                "text_en": english,
                "text_hi": hindi,
                "weight": w.weight(index),
                "tier": w.tier(index),
                "inverted": w.is_inverted(index),
            })
        sets.append({
            "set_number": w.set_number,
            "request_field": w.request_field,
            "required": w.set_number == 1,
            "length": w.length,
            "questions": questions,
        })
    return {
        "weights_version": WEIGHTS_VERSION,
        "scale": {"min": MIN_SCALE, "max": MAX_SCALE},
        "total_questions": number,
        "sets": sets,
    }
