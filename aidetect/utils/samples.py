"""Sample texts for trying the detector."""

SAMPLES: dict[str, str] = {
    "ai": (
        "Artificial intelligence has fundamentally transformed the way we approach complex "
        "problem-solving in modern society. The integration of machine learning algorithms into "
        "various domains has yielded unprecedented levels of efficiency and accuracy. It is "
        "important to note that these technological advancements present both opportunities and "
        "challenges for stakeholders across multiple sectors. Furthermore, the implications of "
        "widespread AI adoption extend beyond mere operational improvements, encompassing broader "
        "societal considerations that must be carefully evaluated. In conclusion, a comprehensive "
        "understanding of AI capabilities and limitations is essential for informed "
        "decision-making in the current technological landscape."
    ),
    "human": (
        "I remember the first time I tried to explain the internet to my grandmother. She looked "
        "at me like I was describing magic, and honestly, maybe I was. We take it for granted "
        "now — the fact that you can pull a tiny slab of glass from your pocket and "
        "immediately know the answer to basically any question. But there's something weird and "
        "kind of sad about that too, right? Like, we've outsourced our curiosity. When's the last "
        "time you wondered about something for more than thirty seconds before Googling it?"
    ),
    "mixed": (
        "Climate change represents one of the most pressing challenges of our time, requiring "
        "immediate action from governments, corporations, and individuals alike. The scientific "
        "consensus on anthropogenic warming is unambiguous at this point. But I'll be honest "
        "— reading the reports doesn't always make me want to act. It makes me feel small, "
        "like what's my reusable bag going to do against a million coal plants? There's a gap "
        "between knowing something is true and feeling like your response to it matters. "
        "Addressing this psychological barrier is crucial for fostering meaningful behavioral "
        "change at scale."
    ),
}
