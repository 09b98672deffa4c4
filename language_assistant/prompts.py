"""
Prompts configuration file.
Centralized location for all AI prompts used by the assistant.

User text is interpolated verbatim: callers are responsible for rejecting
empty input before a prompt is built.
"""

from language_assistant.schemas import AssistantRequest, TaskKind

# ==========================================
# Translation (Vietnamese -> English)
# ==========================================

TRANSLATE_PROMPT = """Translate the following Vietnamese sentence into English and format the output using Markdown.
Provide three different translations that fit different contexts.
For each translation, use a Level 3 Markdown heading (###) for the context (e.g., ### Formal), followed by the English translation in bold, and then a brief explanation of the context on a new line.

Vietnamese: "{text}"
"""

# ==========================================
# Grammar correction (English)
# ==========================================

GRAMMAR_HEADINGS = ("Corrected Sentence", "Corrections & Explanations", "Alternative Rewrites")

GRAMMAR_PROMPT = """Check the grammar of the following English sentence. Identify and explain all grammar or word choice mistakes (if any). Provide the corrected version with explanations for each fix. Suggest 3 alternative rewrites of the sentence: for example, one that sounds natural and conversational, one that's formal/professional, and one that's concise or polished.

Format the entire output using Markdown with the following structure:
- A Level 3 Markdown heading (###) titled "Corrected Sentence", followed by the corrected sentence in **bold**.
- A Level 3 Markdown heading (###) titled "Corrections & Explanations", followed by a bulleted list explaining each fix.
- A Level 3 Markdown heading (###) titled "Alternative Rewrites", followed by a bulleted list with three alternatives (e.g., Natural, Formal, Concise).

Original Sentence: "{text}"
"""

# ==========================================
# Word meaning (English word, Vietnamese explanation)
# ==========================================

# Placeholder markers the presentation layer mounts widgets onto.
UK_AUDIO_PLACEHOLDER = '<span data-placeholder="uk-audio"></span>'
US_AUDIO_PLACEHOLDER = '<span data-placeholder="us-audio"></span>'
PRONUNCIATION_COPY_PLACEHOLDER = '<span data-copy-placeholder="pronunciation"></span>'
EXAMPLE_COPY_PLACEHOLDER = '<span data-copy-placeholder="example"></span>'

WORD_MEANING_PROMPT = (
    """Analyze the following English word and provide a detailed breakdown formatted using Markdown. The response must include:
1.  A Level 3 Markdown heading (###) titled "Nghĩa của từ". Below it, provide the definition(s) in Vietnamese.
2.  A Level 3 Markdown heading (###) titled "Word Type". Below it, specify the part of speech (e.g., Noun, Verb, Adjective).
3.  A Level 3 Markdown heading (###) titled "Pronunciation". Below it, provide:
    - A bullet point for UK pronunciation. The output must be in this exact format: `* UK: <span class="phonetic-text">/phonetic_transcription/</span> """
    + UK_AUDIO_PLACEHOLDER
    + PRONUNCIATION_COPY_PLACEHOLDER
    + """`. For example: `* UK: <span class="phonetic-text">/bəˈnevələnt/</span> """
    + UK_AUDIO_PLACEHOLDER
    + PRONUNCIATION_COPY_PLACEHOLDER
    + """`
    - A bullet point for US pronunciation, following the same format. For example: `* US: <span class="phonetic-text">/bəˈnevələnt/</span> """
    + US_AUDIO_PLACEHOLDER
    + PRONUNCIATION_COPY_PLACEHOLDER
    + """`
4.  A Level 3 Markdown heading (###) titled "Word Forms". Below it, list the different forms if applicable (e.g., Noun, Verb, Adjective, Adverb).
5.  A Level 3 Markdown heading (###) titled "Example Sentences". Below it, provide at least two example sentences using the word in context. For each example, create a bullet point with the English sentence, and on the next line, provide its Vietnamese translation in italics. At the end of the bullet point's content, right after the Vietnamese translation, add an empty span element: `"""
    + EXAMPLE_COPY_PLACEHOLDER
    + """`.

Word: "{text}"
"""
)


def build_translate_prompt(vietnamese_text: str) -> str:
    return TRANSLATE_PROMPT.format(text=vietnamese_text)


def build_grammar_prompt(english_text: str) -> str:
    return GRAMMAR_PROMPT.format(text=english_text)


def build_word_meaning_prompt(english_word: str) -> str:
    return WORD_MEANING_PROMPT.format(text=english_word)


_BUILDERS = {
    TaskKind.TRANSLATE: build_translate_prompt,
    TaskKind.CORRECT_GRAMMAR: build_grammar_prompt,
    TaskKind.DEFINE_WORD: build_word_meaning_prompt,
}


def build_prompt(request: AssistantRequest) -> str:
    """Build the instruction prompt for a request according to its task kind."""
    return _BUILDERS[request.task_kind](request.input_text)
