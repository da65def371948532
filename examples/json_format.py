from mistral_client import ChatMessage, Config, MistralClient, ResponseFormat

Config.load_env()

client = MistralClient()
response = client.chat(
    model="mistral-large-latest",
    response_format=ResponseFormat(type="json_object"),
    messages=[ChatMessage(role="user", content="What is the best French cheese? Answer shortly in JSON.")],
)
print(response.choices[0].message.content)
