from mistral_client import ChatMessage, Config, MistralClient

Config.load_env()

client = MistralClient()
with client.chat_stream(
    model="mistral-small-latest",
    messages=[ChatMessage(role="user", content="What is the best French cheese?")],
) as stream:
    for chunk in stream:
        print(chunk.choices[0].delta.content or "", end="", flush=True)
print()
