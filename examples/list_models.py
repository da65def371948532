from mistral_client import Config, MistralClient

Config.load_env()

client = MistralClient()
for model in client.list_models().data:
    print(model.id)
