from mistral_client import Config, MistralClient

Config.load_env()

client = MistralClient()

prompt = "def fibonacci(n: int):"
suffix = "n = int(input('Enter a number: '))\nprint(fibonacci(n))"

response = client.completion(model="codestral-latest", prompt=prompt, suffix=suffix)

print(prompt)
print(response.choices[0].message.content)
print(suffix)
