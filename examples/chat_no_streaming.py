from mistral_client import ChatMessage, Config, MistralClient

Config.load_env()

client = MistralClient()
response = client.chat(
    model="mistral-small-latest",
    messages=[ChatMessage(role="user", content="What is the best French cheese?")],
)
print(response.choices[0].message.content)
