"""Curated AI-tool catalog shown while a live directory fetch is unavailable."""

from __future__ import annotations

from career_compass.models.tool import AITool

_CATALOG = [
    ("Midjourney", "Image Generation", "Leading text-to-image generative engine.", 4.9, "Paid", ["Creative", "Design"], "fa-palette", "https://www.midjourney.com"),
    ("Pinecone", "Infrastructure", "Vector database for long-term AI memory.", 4.7, "Freemium", ["Database", "Vector"], "fa-database", "https://www.pinecone.io"),
    ("LangChain", "Developer Tools", "Framework for building LLM applications.", 4.8, "Free", ["Python", "LLM"], "fa-link", "https://www.langchain.com"),
    ("Claude", "LLM & Chat", "Advanced reasoning and high-fidelity chat.", 4.9, "Freemium", ["Reasoning", "Chat"], "fa-message", "https://www.anthropic.com/claude"),
    ("ChatGPT", "LLM & Chat", "Conversational AI by OpenAI.", 4.8, "Freemium", ["Assistant", "NLP"], "fa-robot", "https://chat.openai.com"),
    ("Stable Diffusion", "Image Generation", "Open-source latent text-to-image diffusion model.", 4.7, "Free", ["Graphics", "AI"], "fa-image", "https://stability.ai"),
    ("GitHub Copilot", "Coding Tools", "AI pair programmer for writing better code.", 4.8, "Paid", ["Code", "Development"], "fa-terminal", "https://github.com/features/copilot"),
    ("ElevenLabs", "Audio & Voice", "High-quality AI speech synthesis and cloning.", 4.9, "Freemium", ["Voice", "Audio"], "fa-microphone", "https://elevenlabs.io"),
    ("Hugging Face", "Infrastructure", "The platform where the machine learning community builds models.", 4.9, "Free", ["Community", "Models"], "fa-smile", "https://huggingface.co"),
    ("Perplexity", "LLM & Chat", "AI search engine for conversational answers.", 4.8, "Freemium", ["Search", "Chat"], "fa-search", "https://www.perplexity.ai"),
    ("Cursor", "Coding Tools", "AI-first code editor built for pair programming.", 4.9, "Freemium", ["Editor", "Code"], "fa-mouse-pointer", "https://www.cursor.com"),
    ("Weights & Biases", "Data Science", "Developer tools for ML experiment tracking.", 4.7, "Freemium", ["MLOps", "Dashboard"], "fa-chart-line", "https://wandb.ai"),
]


def default_tools() -> list[AITool]:
    return [
        AITool(
            id=str(i),
            name=name,
            category=category,
            description=description,
            rating=rating,
            pricing=pricing,
            tags=list(tags),
            icon=icon,
            url=url,
        )
        for i, (name, category, description, rating, pricing, tags, icon, url) in enumerate(_CATALOG, 1)
    ]
