from mistral_client import Config, MistralClient

Config.load_env()

client = MistralClient()
response = client.embeddings(
    model="mistral-embed",
    input=["What is the best French cheese?"] * 10,
)
for item in response.data:
    print(item.index, item.embedding[:4])
